# tinytools

A handful of small, self-contained command-line tools and the functions
behind them.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Commands

| Command | What it does |
| --- | --- |
| `tt-lettermixer` | Reads standard input and shuffles the inner letters of each word (up to 64 bytes long), keeping the first and last letter in place. |
| `tt-markov FILE COUNT ORDER SEED` | Prints `COUNT` characters of random text built from `FILE` with a character-level Markov chain of the given order. |
| `tt-md5 [FILE ...]` | Prints the MD5 digest in hex of each file, or of standard input when no file is given. |
| `tt-rectangles COUNT INPUT OUTPUT` | Approximates an image with at most `COUNT` flat-coloured rectangles. PPM files are handled directly; other formats go through Pillow. |
| `tt-snake [NAME=value ...]` | A snake game for the terminal. Settings are `SIZE`, `GROW`, `GOAL`, `SHED`, `SHEDS`, `FOODS`, `EXPIRY`, `WAIT`, `WRAP`, `NOCLIP` and `LIFESAVER`, e.g. `tt-snake GOAL=50 WRAP=0`. Arrow keys steer, space pauses, `q` quits. |
| `tt-atoi ARG ...` | Parses each argument the way C's `atoi` does and prints the number. |
| `tt-expand [WIDTH]` | Turns tabs on standard input into spaces; the width defaults to 8, and a width below 1 leaves tabs alone. |
| `tt-fizzbuzz [LIMIT]` | Prints FizzBuzz from 1 to `LIMIT` (default 100). |
| `tt-gcd N ...` | Prints the greatest common divisor of its integer arguments. |
| `tt-hexdump` | Prints a hex-and-ASCII dump of standard input, 16 bytes per line. |
| `tt-crc [--crc32]` | Prints the CRC-64/XZ checksum of standard input, or its CRC-32 with `--crc32`. |
| `tt-http [PORT]` | Serves files from the current directory over HTTP (default port 8080). Only `GET` is answered; paths with a component starting with `.` give 404, and a path ending in `/` serves `index.html`. |

## Library use

The same work is available as functions:

```python
from tinytools.md5 import md5_hex
from tinytools.checksums import crc32, crc64
from tinytools.expand import expand_tabs
from tinytools.textfilters import rot13, format_run_lengths
from tinytools.gcd import gcd_of

md5_hex(b"abc")                   # '900150983cd24fb0d6963f7d28e17f72'
hex(crc32(b"123456789", 0))       # '0xcbf43926'
expand_tabs("a\tb", 4)            # 'a   b'
rot13(b"Hello")                   # b'Uryyb'
format_run_lengths("aaaabbbcca")  # '[("a", 4), ("b", 3), ("c", 2), ("a", 1)]'
gcd_of([12, 18, 30])              # 6
```

Other modules:

- `tinytools.lettermixer`: `shuffle_word` and `mix_stream`, each taking a
  `random.Random`.
- `tinytools.markovchain`: `generate(text, count, order, seed)`.
- `tinytools.md5`: `md5_digest` and `md5_hex`.
- `tinytools.rectangles`: `load_image` and `save_image` read and write files
  (through Pillow, or directly for `.ppm`/`.pnm`); `read_ppm` parses P3 and P6
  data and `write_ppm` writes P6. `approximate` splits a `Raster` into
  `Region`s and `paint` fills each one with its average colour.
- `tinytools.snake`: `Settings`, `parse_settings`, `Direction` and `Game`,
  whose `turn`, `toggle_pause` and `step` drive the game without a terminal.
- `tinytools.cstrings`: `c_atoi` and `c_strlen`.
- `tinytools.textfilters`: also `run_lengths` and `byte_bits`.
- `tinytools.hexdump`: `hexdump(data)` returns the dump as a string.
- `tinytools.httpserver`: `resolve_request` maps a raw request to a status
  line and a file; `serve` runs the server.
- `tinytools.art`: `moon(timestamp)` draws the moon phase (now, by default),
  `heart(variant)` draws one of four hearts, and `hattifatteners(count, seed)`
  returns an SVG picture.
- `tinytools.greetings`: `hello_world`, `hello_spiral`, `owl_hello`,
  `salve_mondo_lines`, and `hello3_encode` / `hello3_decode`, which turn text
  into a chain of `-` and `--` tokens and back.

## Limitations

- `tt-snake` needs a POSIX terminal (it uses `termios`); the `Game` class
  itself works anywhere.
- `tt-http` serves a single directory with no directory listings, no request
  methods other than `GET`, and one connection at a time.
- The `art` and `greetings` functions have no commands of their own.