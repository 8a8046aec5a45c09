import enum
import inspect
import io

import pytest

from cokit.debug import Debug, format_value, quote
from cokit.optional import Optional
from cokit.variant import Variant


def test_quote_escapes_newline():
    assert quote("a\nb", '"') == '"a\\nb"'


def test_quote_escapes_quote_char_and_control():
    assert quote("it's", "'") == "'it\\'s'"
    assert quote("\x01", '"') == '"\\x01"'
    assert quote("a\\b", '"') == '"a\\\\b"'


def test_format_scalars():
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(None) == "nil"
    assert format_value(42) == "42"
    assert format_value("x") == '"x"'
    assert format_value(1.5) == "1.500000000000000"


def test_format_containers():
    assert format_value([1, 2]) == "{1, 2}"
    assert format_value(("a",)) == '{"a"}'
    assert format_value({"a": 1}) == '{{"a", 1}}'


def test_format_optional_variant_enum():
    class Color(enum.Enum):
        RED = 7

    assert format_value(Optional(3)) == "3"
    assert format_value(Optional()) == "nil"
    assert format_value(Variant([int, str], "s")) == '"s"'
    assert format_value(Color.RED) == "7"


def test_print_writes_location_and_values():
    buf = io.StringIO()
    line = inspect.currentframe().f_lineno + 1
    d = Debug(stream=buf)
    d.print("x", 1)
    d.close()
    assert buf.getvalue() == f'test_debug.py:{line}:\t "x" 1\n'


def test_print_with_source_line():
    buf = io.StringIO()
    with Debug(line="expr", stream=buf) as d:
        d.print(5)
    assert "\t[expr]\t 5\n" in buf.getvalue()


def test_disabled_writes_nothing():
    buf = io.StringIO()
    with Debug(enable=False, stream=buf) as d:
        d.print(1, 2)
    assert buf.getvalue() == ""


def test_on_false_suppresses():
    buf = io.StringIO()
    with Debug(stream=buf) as d:
        d.on(False).print("hidden")
    assert buf.getvalue() == ""


def test_failed_check_raises():
    with pytest.raises(RuntimeError, match="assertion failed: 1 < 0"):
        with Debug() as d:
            d.check(1) < 0


def test_passing_check_is_silent():
    buf = io.StringIO()
    with Debug(stream=buf) as d:
        d.check(1) == 1
        d.check(2) >= 1
    assert buf.getvalue() == ""


def test_string_check_message_quotes():
    with pytest.raises(RuntimeError, match='assertion failed: "a" == "b"'):
        with Debug() as d:
            d.check("a") == "b"


def test_fail_raises_error():
    d = Debug()
    d.fail()
    with pytest.raises(RuntimeError, match="error:"):
        d.close()


def test_fail_false_silences():
    buf = io.StringIO()
    with Debug(stream=buf) as d:
        d.fail(False).print("x")
    assert buf.getvalue() == ""


def test_close_twice_writes_once():
    buf = io.StringIO()
    d = Debug(stream=buf).print(3)
    d.close()
    d.close()
    assert buf.getvalue().count("\n") == 1