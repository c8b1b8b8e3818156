"""Test class ExpressionParser."""
import pytest

from string_calculator.common.errors import CalculatorError, ParseError
from string_calculator.common.models import Operator
from string_calculator.common.parser import ExpressionParser


def test_split_basic():
    """split separates the quoted left operand, the operator and the right-hand side."""
    assert ExpressionParser.split('"hello" + "world"') == ("hello", "+", '"world"')


def test_split_keeps_spaces_inside_quotes():
    """Spaces inside quotes belong to the operand."""
    assert ExpressionParser.split('"a + b" - "c d"') == ("a + b", "-", '"c d"')


@pytest.mark.parametrize("line,left,operator,text,number", [
    ('"hello" + "world"', "hello", Operator.CONCAT, "world", None),
    ('"hello" - "l"', "hello", Operator.REMOVE, "l", None),
    ('"ab" * 3', "ab", Operator.REPEAT, None, 3),
    ('"hello" / 2', "hello", Operator.TRUNCATE, None, 2),
    ('   "ab" * 10   ', "ab", Operator.REPEAT, None, 10),
    ('"x"   /\t1', "x", Operator.TRUNCATE, None, 1),
    ('"abcdefghij" + "0123456789"', "abcdefghij", Operator.CONCAT, "0123456789", None),
    ('"ab" * 007', "ab", Operator.REPEAT, None, 7),
    ('"ab" * ' + "0" * 5000 + "3", "ab", Operator.REPEAT, None, 3),
    ('"при вет" - "и"', "при вет", Operator.REMOVE, "и", None),
])
def test_parse_valid(line, left, operator, text, number):
    """parse builds an Operation with quotes stripped and the right operand populated."""
    operation = ExpressionParser.parse(line)
    assert operation.left == left
    assert operation.operator is operator
    assert operation.string_operand == text
    assert operation.numeric_operand == number


@pytest.mark.parametrize("line", [
    "",                          # Empty input
    "    ",                      # Whitespace only
    'hello + "world"',           # Unquoted left operand
    '"hello"+"world"',           # Missing separators
    '"hello" +',                 # Missing right operand
    '"" + "x"',                  # Empty left operand
    '"hello world" + "x"',       # Left operand longer than 10 characters
    '"a" + ""',                  # Empty right operand
    '"a" + "01234567890"',       # Right operand longer than 10 characters
    '"a" % "b"',                 # Unsupported operator
    '"a" ++ "b"',                # Operator made of two symbols
    '"a" + "b" extra',           # Trailing content
    '"a" + "b" "c"',             # Two right operands
    '"a" * 3 4',                 # Trailing number
    '"a" * -1',                  # Signed number
    '"a" * 2.5',                 # Non-integer number
    '"a" * 0',                   # Number below range
    '"a" / 11',                  # Number above range
    '"a" * 99999999999999999999',  # Number far above range
    '"a" * ' + "1" * 5000,      # Too many digits to convert
    '"a" * ３',                  # Non-ASCII digit
])
def test_parse_invalid(line):
    """parse raises ParseError for malformed or out-of-range input."""
    with pytest.raises(ParseError):
        ExpressionParser.parse(line)


@pytest.mark.parametrize("line", ['"hello" + 3', '"hello" - 10'])
def test_parse_text_operator_rejects_number(line):
    """+ and - need a quoted right operand."""
    with pytest.raises(ParseError, match="requires a string operand"):
        ExpressionParser.parse(line)


@pytest.mark.parametrize("line", ['"hello" * "world"', '"hello" / "2"'])
def test_parse_numeric_operator_rejects_text(line):
    """* and / need a numeric right operand."""
    with pytest.raises(ParseError, match="requires a numeric operand"):
        ExpressionParser.parse(line)


def test_parse_error_is_value_error():
    """ParseError stays catchable as ValueError and CalculatorError."""
    with pytest.raises(ValueError):
        ExpressionParser.parse("")
    assert issubclass(ParseError, CalculatorError)


def test_parse_empty_message():
    """An empty line is reported as such."""
    with pytest.raises(ParseError, match="Empty input"):
        ExpressionParser.parse("  \n")


def test_parse_very_long_number_is_out_of_range():
    """A digit run far longer than any valid number is rejected without converting it."""
    with pytest.raises(ParseError, match="between 1 and 10"):
        ExpressionParser.parse('"a" / ' + "9" * 5000)
