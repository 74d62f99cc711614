[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinytools"
version = "0.1.0"
description = "Small command-line tools: checksums, text filters, image approximation, a terminal snake game and more"
requires-python = ">=3.10"
keywords = ["md5", "crc", "hexdump", "markov", "snake", "rot13", "expand", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tt-lettermixer = "tinytools.lettermixer:main"
tt-markov = "tinytools.markovchain:main"
tt-md5 = "tinytools.md5:main"
tt-rectangles = "tinytools.rectangles:main"
tt-snake = "tinytools.snake:main"
tt-atoi = "tinytools.cstrings:main"
tt-expand = "tinytools.expand:main"
tt-fizzbuzz = "tinytools.fizzbuzz:main"
tt-gcd = "tinytools.gcd:main"
tt-hexdump = "tinytools.hexdump:main"
tt-crc = "tinytools.checksums:main"
tt-http = "tinytools.httpserver:main"

[tool.hatch.build.targets.wheel]
packages = ["tinytools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
