"""Pydantic models for parsed string operations and per-line outcomes."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# Operand and display limits
MAX_OPERAND_LENGTH: int = 10
MIN_NUMBER: int = 1
MAX_NUMBER: int = 10
DISPLAY_BUDGET: int = 40
OVERFLOW_MARKER: str = "..."


class Operator(str, Enum):
    """Supported string operators, valued by their input symbol."""

    CONCAT = "+"
    REMOVE = "-"
    REPEAT = "*"
    TRUNCATE = "/"

    @property
    def requires_text_operand(self) -> bool:
        """True when the right-hand side must be a quoted string."""
        return self in (Operator.CONCAT, Operator.REMOVE)


class Operation(BaseModel):
    """
    A single validated request: a quoted left operand, an operator and
    either a text or a numeric right operand.

    Exactly one of ``string_operand`` / ``numeric_operand`` is set, and which
    one is decided by ``operator``.
    """

    # Built once by the parser and consumed once by the evaluator
    model_config = ConfigDict(frozen=True)

    left: str = Field(
        ...,
        min_length=1,
        max_length=MAX_OPERAND_LENGTH,
        description="Left operand with quotes stripped",
    )
    operator: Operator = Field(..., description="Operator applied to the operands")
    string_operand: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=MAX_OPERAND_LENGTH,
        description="Right operand for + and -",
    )
    numeric_operand: Optional[int] = Field(
        default=None,
        ge=MIN_NUMBER,
        le=MAX_NUMBER,
        description="Right operand for * and /",
    )

    @model_validator(mode="after")
    def operand_matches_operator(self) -> "Operation":
        """Ensure the populated operand is the one the operator expects."""
        if self.operator.requires_text_operand:
            if self.string_operand is None or self.numeric_operand is not None:
                raise ValueError(f"Operator {self.operator.value!r} requires a string operand only")
        elif self.numeric_operand is None or self.string_operand is not None:
            raise ValueError(f"Operator {self.operator.value!r} requires a numeric operand only")
        return self


class LineOutcome(BaseModel):
    """Result of processing one input line: either a display-ready result or an error."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Input line as typed, trimmed")
    result: Optional[str] = Field(default=None, description="Formatted result on success")
    error: Optional[str] = Field(default=None, description="Error message on failure")

    @model_validator(mode="after")
    def exactly_one_of_result_or_error(self) -> "LineOutcome":
        """An outcome carries a result or an error, never both or neither."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of result or error must be set")
        return self

    @property
    def ok(self) -> bool:
        """True when the line evaluated successfully."""
        return self.error is None
