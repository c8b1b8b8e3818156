"""Parse string-calculator input lines into validated operations."""
import re
from typing import Optional, Tuple

from pydantic import ValidationError

from string_calculator.common.errors import ParseError
from string_calculator.common.models import (
    MAX_NUMBER,
    MAX_OPERAND_LENGTH,
    MIN_NUMBER,
    Operation,
    Operator,
)


# Whole line: quoted left operand, operator token, right-hand side
EXPRESSION_PATTERN: re.Pattern = re.compile(r'^"(?P<left>[^"]*)"\s+(?P<op>\S+)\s+(?P<right>.+)$')
# Right-hand side alternatives
QUOTED_PATTERN: re.Pattern = re.compile(r'"(?P<text>[^"]*)"')
NUMBER_PATTERN: re.Pattern = re.compile(r"[0-9]+")


class ExpressionParser:
    """
    Parse and validate a single string-calculator expression.

    Accepted forms (surrounding whitespace is ignored)::

        "<left>" + "<right>"
        "<left>" - "<right>"
        "<left>" * <number>
        "<left>" / <number>

    Text operands are 1 to 10 characters without double quotes, numbers are
    ASCII digit sequences in the range 1 to 10.

    Algorithm:
        1. Split the line into left operand, operator and right-hand side
        2. Resolve the operator symbol
        3. Classify the right-hand side as quoted text or a number
        4. Check the right-hand side kind and range against the operator
    """

    @staticmethod
    def split(line: str) -> Tuple[str, str, str]:
        """
        Split a trimmed line into its three parts.

        :param str line: Input line without surrounding whitespace

        :return: Left operand (quotes stripped), operator symbol, raw right-hand side
        :rtype: Tuple[str, str, str]
        :raises ParseError: If the line does not have the three-part shape
        """
        match = EXPRESSION_PATTERN.match(line)
        if match is None:
            raise ParseError(f'Input must look like "text" op operand: {line!r}')
        return match.group("left"), match.group("op"), match.group("right")

    @staticmethod
    def _operator(symbol: str) -> Operator:
        """
        Resolve an operator symbol.

        :param str symbol: Operator token

        :return: Matching operator
        :rtype: Operator
        :raises ParseError: If the symbol is not one of + - * /
        """
        try:
            return Operator(symbol)
        except ValueError:
            raise ParseError(f"Unsupported operator: {symbol!r}") from None

    @staticmethod
    def _classify(right: str) -> Tuple[Optional[str], Optional[str]]:
        """
        Classify the right-hand side as quoted text or a digit sequence.

        :param str right: Raw right-hand side

        :return: (text, digits), exactly one of them set
        :rtype: Tuple[Optional[str], Optional[str]]
        :raises ParseError: If the right-hand side is neither
        """
        quoted = QUOTED_PATTERN.fullmatch(right)
        if quoted is not None:
            return quoted.group("text"), None
        if NUMBER_PATTERN.fullmatch(right):
            return None, right
        raise ParseError(f"Right operand must be a quoted string or an integer: {right!r}")

    @staticmethod
    def _check_text(text: str, position: str) -> str:
        if not 1 <= len(text) <= MAX_OPERAND_LENGTH:
            raise ParseError(
                f"{position} operand must be 1 to {MAX_OPERAND_LENGTH} characters long, got {len(text)}"
            )
        return text

    @staticmethod
    def _check_number(digits: str) -> int:
        significant = digits.lstrip("0")
        # Long digit runs are out of range whatever their value, and int() refuses very long ones
        if len(significant) > len(str(MAX_NUMBER)):
            raise ParseError(
                f"Number must be between {MIN_NUMBER} and {MAX_NUMBER}, got a {len(significant)}-digit number"
            )
        number = int(significant or "0")
        if not MIN_NUMBER <= number <= MAX_NUMBER:
            raise ParseError(f"Number must be between {MIN_NUMBER} and {MAX_NUMBER}, got {number}")
        return number

    @staticmethod
    def parse(raw_line: str) -> Operation:
        """
        Parse one input line into an Operation.

        :param str raw_line: Line as read from the user

        :return: Validated operation with quotes stripped
        :rtype: Operation
        :raises ParseError: If the line is empty, malformed, or an operand has the wrong kind or size
        """
        line = raw_line.strip()
        if not line:
            raise ParseError("Empty input")

        left, symbol, right = ExpressionParser.split(line)
        left = ExpressionParser._check_text(left, "Left")
        operator = ExpressionParser._operator(symbol)
        text, digits = ExpressionParser._classify(right)

        string_operand: Optional[str] = None
        numeric_operand: Optional[int] = None
        if operator.requires_text_operand:
            if text is None:
                raise ParseError("Operation requires a string operand")
            string_operand = ExpressionParser._check_text(text, "Right")
        else:
            if digits is None:
                raise ParseError("Operation requires a numeric operand")
            numeric_operand = ExpressionParser._check_number(digits)

        try:
            return Operation(
                left=left,
                operator=operator,
                string_operand=string_operand,
                numeric_operand=numeric_operand,
            )
        except ValidationError as exc:
            raise ParseError(f"Invalid operation: {exc}") from exc
