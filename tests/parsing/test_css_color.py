import pytest

from chromahub.exceptions import InvalidColorSyntax, InvalidNumericCharacters, InvalidNumericSyntax
from chromahub.parsing.css_color import parse_hsl_hsv_tuple, parse_rgb_num, parse_rgb_str


def test_rgb_num_parsing():
    # integers
    assert parse_rgb_num("104") == 104
    assert parse_rgb_num("234923") == 255
    assert parse_rgb_num("-3") == 0
    # floats
    assert parse_rgb_num(".48235") == 123
    assert parse_rgb_num("1.04") == 255
    assert parse_rgb_num("0.5") == 127
    assert parse_rgb_num("-0.5") == 0
    # percents
    assert parse_rgb_num("48%") == 122
    assert parse_rgb_num("115%") == 255
    assert parse_rgb_num("20%") == 51
    assert parse_rgb_num("0%") == 0
    assert parse_rgb_num("100%") == 255


def test_rgb_num_errors():
    with pytest.raises(InvalidNumericCharacters):
        parse_rgb_num("abc")
    with pytest.raises(InvalidNumericSyntax):
        parse_rgb_num("123%%")


def test_rgb_str_parsing():
    assert parse_rgb_str("rgb(125, 20%, 0.5)") == (125, 51, 127)
    # clamping in every direction
    assert parse_rgb_str("rgb(-125, -20%, 10.5)") == (0, 0, 255)
    assert parse_rgb_str("rgb(0,0,0)") == (0, 0, 0)
    assert parse_rgb_str("rgb(  255 ,  100%  , 1.0 )") == (255, 255, 255)


@pytest.mark.parametrize("text", [
    "rgB(123, 33, 2)",
    "RGB(1, 2, 3)",
    " rgb(1, 2, 3)",
    "rgb(123, 123, 41, 22)",
    "rgb(123, 123)",
    "rgB(())",
    "rgb(1, 2, 3",
    "rgb(1, 2, 3))",
    "rgb(a, b, c)",
    "rgb(0,0)",
    "rgba(1, 2, 3, 4)",
    "hsl(1, 2%, 3%)",
])
def test_rgb_str_bad_syntax(text):
    with pytest.raises(InvalidColorSyntax):
        parse_rgb_str(text)


def test_rgb_str_numeric_errors_propagate():
    with pytest.raises(InvalidNumericSyntax):
        parse_rgb_str("rgb(1, , 3)")
    with pytest.raises(InvalidNumericSyntax):
        parse_rgb_str("rgb(1.2.3, 0, 0)")


def _rounded(hsl):
    return round(hsl[0]), round(hsl[1] * 100), round(hsl[2] * 100)


def test_hslv_tuple_parsing():
    assert _rounded(parse_hsl_hsv_tuple("(123, 40%, 40%)")) == (123, 40, 40)
    # hue angle wrapping
    assert _rounded(parse_hsl_hsv_tuple("(-597, 40%, 40%)")) == (123, 40, 40)
    assert _rounded(parse_hsl_hsv_tuple("(1203, 40%, 40%)")) == (123, 40, 40)
    # percentage clamping
    assert _rounded(parse_hsl_hsv_tuple("(123, 140%, -40%)")) == (123, 100, 0)


def test_hslv_tuple_exact_values():
    h, s, l = parse_hsl_hsv_tuple("(-597, 40%, 40%)")
    assert h == 123.0
    assert s == 0.4
    assert l == 0.4
    h, _, _ = parse_hsl_hsv_tuple("(-0.5, 0%, 0%)")
    assert h == 359.5
    h, _, _ = parse_hsl_hsv_tuple("(360, 0%, 0%)")
    assert h == 0.0


def test_hslv_tuple_huge_hue_terminates():
    h, _, _ = parse_hsl_hsv_tuple("(9223372036854775807, 0%, 0%)")
    assert h == float((2 ** 63 - 1) % 360)
    h, _, _ = parse_hsl_hsv_tuple("(1000000000000000000000.5, 0%, 0%)")
    assert 0.0 <= h < 360.0


@pytest.mark.parametrize("text", [
    "(14%, 140%, 12%)",
    "(14, 140, 12%)",
    "(14, 40%, 0.5)",
    "(14, 40%)",
    "(14, 40%, 40%, 40%)",
    "14, 40%, 40%)",
    "(14, 40%, 40%",
    "[14, 40%, 40%]",
])
def test_hslv_tuple_bad_syntax(text):
    with pytest.raises(InvalidColorSyntax):
        parse_hsl_hsv_tuple(text)


def test_hslv_tuple_numeric_errors_propagate():
    with pytest.raises(InvalidNumericCharacters):
        parse_hsl_hsv_tuple("(12deg, 40%, 40%)")
    with pytest.raises(InvalidNumericSyntax):
        parse_hsl_hsv_tuple("(12, 40.5%, 40%)")
