"""Evaluate parsed string operations."""
from typing import Callable, Dict

from string_calculator.common.errors import EvalError
from string_calculator.common.formatter import format_result
from string_calculator.common.models import Operation, Operator


# Type alias for operator handlers (taking an operation, returning the raw result)
OperatorFn = Callable[[Operation], str]


def _concat(operation: Operation) -> str:
    return operation.left + operation.string_operand


def _remove(operation: Operation) -> str:
    # str.replace scans left to right and never matches inside a removed span
    return operation.left.replace(operation.string_operand, "")


def _repeat(operation: Operation) -> str:
    return operation.left * operation.numeric_operand


def _truncate(operation: Operation) -> str:
    # The parser already rejects 0, but the evaluator does not trust its input
    if operation.numeric_operand == 0:
        raise EvalError("division by zero")
    part_length = len(operation.left) // operation.numeric_operand
    return operation.left[:part_length]


# Mapping of operators to their handlers
OPERATORS: Dict[Operator, OperatorFn] = {
    Operator.CONCAT: _concat,
    Operator.REMOVE: _remove,
    Operator.REPEAT: _repeat,
    Operator.TRUNCATE: _truncate,
}


class StringEvaluator:
    """
    Evaluate a validated Operation.

    Operators:
        - ``+`` concatenates the two strings
        - ``-`` removes every non-overlapping occurrence of the right string
        - ``*`` repeats the left string n times
        - ``/`` keeps the first len(left) // n characters

    The raw result is passed through the display formatter exactly once.
    """

    @staticmethod
    def compute(operation: Operation) -> str:
        """
        Compute the raw, unformatted result of an operation.

        :param Operation operation: Parsed operation

        :return: Raw result string
        :rtype: str
        :raises EvalError: If the operation cannot be evaluated
        """
        handler = OPERATORS.get(operation.operator)
        if handler is None:
            raise EvalError(f"Unknown operator: {operation.operator!r}")
        return handler(operation)

    @staticmethod
    def evaluate(operation: Operation) -> str:
        """
        Evaluate an operation and format the result for display.

        :param Operation operation: Parsed operation

        :return: Display-ready result, possibly empty
        :rtype: str
        :raises EvalError: If the operation cannot be evaluated
        """
        return format_result(StringEvaluator.compute(operation))
