from tinytools.hexdump import hexdump


def test_empty_input():
    assert hexdump(b"") == "00000000\n"


def test_last_line_is_length():
    data = bytes(range(40))
    lines = hexdump(data).splitlines()
    assert lines[-1] == f"{len(data):08x}"
    assert len(lines) == 4


def test_text_column_is_aligned():
    lines = hexdump(b"Hello, world! This is a test of alignment.")
    rows = lines.splitlines()[:-1]
    columns = {row.index("|") for row in rows}
    assert len(columns) == 1
    assert all(row.endswith("|") for row in rows)


def test_printable_and_unprintable_text():
    row = hexdump(b"A\x00~\x7f").splitlines()[0]
    assert row.startswith("00000000  41 00 7e 7f ")
    assert row.endswith("|A.~.|")


def test_offsets_step_by_sixteen():
    rows = hexdump(bytes(48)).splitlines()
    assert [row[:8] for row in rows] == ["00000000", "00000010", "00000020", "00000030"]