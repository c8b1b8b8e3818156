"""Error taxonomy of the string calculator."""


class CalculatorError(ValueError):
    """Base class for recoverable calculator errors."""


class ParseError(CalculatorError):
    """Raised when an input line does not match the expression grammar."""


class EvalError(CalculatorError):
    """Raised when a parsed operation cannot be evaluated."""
