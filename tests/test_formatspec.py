import pytest

from pipex.formatspec import (
    DECIMAL,
    HEX_LOWER,
    HEX_UPPER,
    FormatSpec,
    parse_spec,
    to_base,
)


def test_parse_all_flags_width_and_precision():
    fmt = "%-0+ #5.3d"
    spec, end = parse_spec(fmt, 1, iter([]))
    assert end == len(fmt)
    assert spec.specifier == "d"
    assert spec.left_justify and spec.zero_pad and spec.plus
    assert spec.space and spec.hash
    assert spec.width == 5
    assert spec.precision == 3


def test_parse_without_flags_has_defaults():
    spec, end = parse_spec("%d rest", 1, iter([]))
    assert end == 2
    assert spec.width == 0
    assert spec.precision == -1
    assert not (spec.left_justify or spec.zero_pad or spec.plus or spec.hash)


def test_parse_star_takes_arguments_in_order():
    args = iter([7, 2, "left"])
    spec, _ = parse_spec("%*.*x", 1, args)
    assert spec.width == 7
    assert spec.precision == 2
    assert list(args) == ["left"]


def test_parse_dot_without_digits_gives_zero_precision():
    spec, _ = parse_spec("%.d", 1, iter([]))
    assert spec.precision == 0


def test_parse_pointer_sets_hash_and_lowercase():
    spec, _ = parse_spec("%p", 1, iter([]))
    assert spec.hash is True
    assert spec.lowercase is True
    assert spec.digits == HEX_LOWER


def test_parse_upper_hex():
    spec, _ = parse_spec("%X", 1, iter([]))
    assert spec.uppercase is True
    assert spec.lowercase is False
    assert spec.digits == HEX_UPPER


@pytest.mark.parametrize("fmt", ["%5q", "%5.", "%", "%-"])
def test_parse_invalid_specifier_raises(fmt):
    with pytest.raises(ValueError):
        parse_spec(fmt, 1, iter([]))


def test_parse_star_without_argument_raises():
    with pytest.raises(ValueError):
        parse_spec("%*d", 1, iter([]))


@pytest.mark.parametrize("number", [0, 1, 15, 16, 255, 4096, 123456789])
def test_to_base_hex_round_trip(number):
    assert int(to_base(number, HEX_LOWER), 16) == number


@pytest.mark.parametrize("number", [0, 9, 10, 99, 100, 2147483648])
def test_to_base_decimal_matches_str(number):
    assert to_base(number, DECIMAL) == str(number)


def test_to_base_zero():
    assert to_base(0, HEX_UPPER) == "0"


def test_to_base_errors():
    with pytest.raises(ValueError):
        to_base(-1, DECIMAL)
    with pytest.raises(ValueError):
        to_base(5, "0")


def test_convert_negative_decimal():
    spec = FormatSpec("d", width=6)
    done = spec.convert(-42)
    assert done.negative is True
    assert done.body == str(42)
    assert done.width == spec.width - 1


def test_convert_decimal_wraps_to_int32():
    done = FormatSpec("i").convert(2147483648)
    assert done.negative is True
    assert done.body == "2147483648"


def test_convert_unsigned_wraps():
    done = FormatSpec("u").convert(-1)
    assert done.body == str(2**32 - 1)
    assert done.negative is False


def test_convert_null_pointer():
    spec, _ = parse_spec("%010p", 1, iter([]))
    done = spec.convert(None)
    assert done.body == "(nil)"
    assert done.hash is False
    assert done.lowercase is False
    assert done.zero_pad is False


def test_convert_pointer_hex():
    spec, _ = parse_spec("%p", 1, iter([]))
    done = spec.convert(48879)
    assert int(done.body, 16) == 48879
    assert done.body == done.body.lower()
    assert done.hash is True


def test_convert_zero_hex_clears_prefix():
    spec, _ = parse_spec("%#08x", 1, iter([]))
    done = spec.convert(0)
    assert done.body == "0"
    assert done.hash is False
    assert done.zero_pad is False
    assert done.width == spec.width


def test_convert_hash_reserves_prefix_room():
    spec, _ = parse_spec("%#10X", 1, iter([]))
    done = spec.convert(255)
    assert done.body == done.body.upper()
    assert int(done.body, 16) == 255
    assert done.width == spec.width - 2


def test_convert_plus_reserves_sign_room():
    spec, _ = parse_spec("%+8d", 1, iter([]))
    done = spec.convert(7)
    assert done.width == spec.width - 1
    assert done.body == str(7)


def test_precision_pads_with_zeros():
    spec, _ = parse_spec("%.5d", 1, iter([]))
    done = spec.convert(42)
    assert len(done.body) == spec.precision
    assert done.body.lstrip("0") == str(42)


def test_precision_shorter_than_body_keeps_body():
    spec, _ = parse_spec("%.1u", 1, iter([]))
    done = spec.convert(12345)
    assert done.body == str(12345)


def test_precision_below_width_disables_zero_pad():
    spec, _ = parse_spec("%08.3d", 1, iter([]))
    assert spec.zero_pad is True
    done = spec.convert(5)
    assert done.zero_pad is False


def test_convert_string_and_null_string():
    assert FormatSpec("s").convert("hello").body == "hello"
    assert FormatSpec("s").convert(None).body == "(null)"


def test_convert_char_and_percent():
    assert FormatSpec("c").convert(ord("A")).body == "A"
    spec, end = parse_spec("%%", 1, iter([]))
    assert end == 2
    assert spec.convert(None).body == "%"


def test_convert_leaves_original_untouched():
    spec = FormatSpec("d", width=4)
    spec.convert(-3)
    assert spec.width == 4
    assert spec.body == ""