import pytest

from basekit.printf import printf


def test_plain_text(capfd):
    count = printf("just text")
    out = capfd.readouterr().out
    assert out == "just text"
    assert count == len(out)


def test_mixed_conversions_count_matches_output(capfd):
    count = printf("%c|%s|%d|%u|%x|%X|%%", "q", "word", -12, 12, 255, 255)
    out = capfd.readouterr().out
    assert count == len(out.encode("utf-8"))
    parts = out.split("|")
    assert parts[0] == "q"
    assert parts[1] == "word"
    assert int(parts[2]) == -12
    assert int(parts[3]) == 12
    assert int(parts[4], 16) == 255
    assert int(parts[5], 16) == 255
    assert parts[5] == parts[5].upper()
    assert parts[4] == parts[4].lower()
    assert parts[6] == "%"


def test_null_string(capfd):
    printf("%s", None)
    assert capfd.readouterr().out == "(null)"


def test_nil_pointer(capfd):
    printf("%p", None)
    assert capfd.readouterr().out == "(nil)"


def test_pointer_round_trip(capfd):
    printf("%p", 0xDEADBEEF)
    out = capfd.readouterr().out
    assert out.startswith("0x")
    assert int(out[2:], 16) == 0xDEADBEEF


def test_unsigned_wraps(capfd):
    printf("%u", -1)
    assert capfd.readouterr().out == "4294967295"


def test_hex_wraps_like_unsigned(capfd):
    printf("%x", -1)
    assert int(capfd.readouterr().out, 16) == 2**32 - 1


def test_signed_wraps(capfd):
    printf("%d", 2**31)
    assert int(capfd.readouterr().out) == -(2**31)


@pytest.mark.parametrize("n", [0, 1, -1, 2147483647, -2147483648])
def test_decimal_round_trip(capfd, n):
    printf("%i", n)
    assert int(capfd.readouterr().out) == n


def test_char_from_int(capfd):
    printf("%c", ord("A"))
    assert capfd.readouterr().out == "A"


def test_trailing_percent_raises(capfd):
    with pytest.raises(ValueError):
        printf("abc%")
    assert capfd.readouterr().out == ""


def test_unknown_conversion_raises():
    with pytest.raises(ValueError):
        printf("%q", 1)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        printf("%d %d", 1)