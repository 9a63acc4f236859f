import pytest
from pydantic import ValidationError

from linesort.sorting.domain.exceptions import NumberConversionError
from linesort.sorting.locales.parsing_context import ParsingContext, DEFAULT_PARSING_CONTEXT


@pytest.fixture
def context():
    return ParsingContext()


def test_default_context_is_en_us():
    assert DEFAULT_PARSING_CONTEXT.code == "en_US"
    assert DEFAULT_PARSING_CONTEXT.decimal_separator == "."


def test_context_is_frozen(context):
    with pytest.raises(ValidationError):
        context.decimal_separator = ","


def test_decimal_separator_is_fixed():
    # Разделитель не настраивается: запятая отклоняется валидатором
    with pytest.raises(ValidationError):
        ParsingContext(decimal_separator=",")


def test_blank_characters_must_be_whitespace():
    with pytest.raises(ValidationError):
        ParsingContext(blank_characters=" x")


@pytest.mark.parametrize("text", ["", " ", "\t", "\r\n", " \t\r\n "])
def test_is_blank(context, text):
    assert context.is_blank(text)


@pytest.mark.parametrize("text", ["0", " - ", "\u00a0", "a"])
def test_is_not_blank(context, text):
    assert not context.is_blank(text)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("42", 42),
        (" -7 ", -7),
        ("007", 7),
        ("-0", 0),
        ("5\r\n", 5),
        ("9223372036854775807", 2 ** 63 - 1),
        ("-9223372036854775808", -(2 ** 63)),
        ("000000000000000000000001", 1),
        ("0" * 5000 + "7", 7),
        ("-" + "0" * 5000 + "7", -7),
        ("0" * 5000, 0),
    ],
)
def test_parse_int(context, text, expected):
    assert context.parse_int(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "-",
        "--5",
        "1 2",
        "1-2",
        "5-",
        "abc",
        "9223372036854775808",
        "-9223372036854775809",
        "1" * 5000,
    ],
)
def test_parse_int_failures(context, text):
    with pytest.raises(NumberConversionError):
        context.parse_int(text)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1.5", 1.5),
        ("-2.5", -2.5),
        ("0.0", 0.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("  3  ", 3.0),
        ("-0.25", -0.25),
    ],
)
def test_parse_float(context, text, expected):
    assert context.parse_float(text) == expected


@pytest.mark.parametrize("text", ["", "-", ".", "1.2.3", "1 .5", "1e5", "--1.0", "1" * 400])
def test_parse_float_failures(context, text):
    with pytest.raises(NumberConversionError):
        context.parse_float(text)


def test_conversion_error_message_names_component(context):
    with pytest.raises(NumberConversionError) as exc_info:
        context.parse_int("x")
    assert exc_info.value.component == "ParsingContext"
    assert "ParsingContext" in str(exc_info.value)
