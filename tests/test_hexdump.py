import io

import pytest

from cokit.hexdump import hexdump, hexdump_lines, main


def test_full_line_format():
    lines = list(hexdump_lines(b"0123456789abcdef"))
    assert lines == [
        "00000000 30 31 32 33 34 35 36 37 38 39 61 62 63 64 65 66 |0123456789abcdef|"
    ]


def test_partial_line_is_padded_and_nonprintable_dotted():
    lines = list(hexdump_lines(b"AB\x00"))
    assert lines == ["00000000 41 42 00" + " " * 39 + " |AB.|"]


def test_second_line_address():
    lines = list(hexdump_lines(bytes(range(20))))
    assert len(lines) == 2
    assert lines[1].startswith("00000010 ")


def test_empty_input_gives_no_lines():
    assert list(hexdump_lines(b"")) == []


def test_width_controls_bytes_per_line():
    data = bytes(range(64))
    for line in hexdump_lines(data, 8):
        hex_part = line.split(" |")[0]
        assert len(hex_part.split()) == 1 + 8


def test_high_bytes_are_dotted():
    (line,) = hexdump_lines(bytes([0x7F, 0x80, 0xFF, 0x20]))
    assert line.endswith("|... |")


def test_invalid_width():
    with pytest.raises(ValueError):
        list(hexdump_lines(b"abc", 0))


def test_hexdump_writes_lines():
    out = io.StringIO()
    data = b"hello world, this is a test"
    hexdump(data, 16, out)
    assert out.getvalue() == "\n".join(hexdump_lines(data)) + "\n"


def test_main_with_file(tmp_path, capsys):
    path = tmp_path / "data.bin"
    data = b"some file contents\x01\x02"
    path.write_bytes(data)
    assert main(["-f", str(path), "-x", "8"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "\n".join(hexdump_lines(data, 8)) + "\n"


def test_main_missing_file(tmp_path, capsys):
    path = tmp_path / "absent.bin"
    assert main(["-f", str(path)]) == 0
    captured = capsys.readouterr()
    assert str(path) in captured.err
    assert captured.out == ""


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert "-x <size>" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [["-x"], ["-f"], ["-x", "0"], ["-x", "abc"], ["--bogus"]],
)
def test_main_errors(argv):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code not in (0, None)