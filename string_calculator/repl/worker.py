"""Process a single input line into a tagged outcome."""
from pydantic import BaseModel, ConfigDict, Field

from string_calculator.common.errors import CalculatorError
from string_calculator.common.evaluator import StringEvaluator
from string_calculator.common.logger import logger
from string_calculator.common.models import LineOutcome
from string_calculator.common.parser import ExpressionParser


class LineWorker(BaseModel):
    """
    Worker responsible for evaluating a single input line.

    Lifecycle:
        - Created by the session for one line only
        - Parses, evaluates and formats the expression
        - Returns a LineOutcome carrying either the result or the error message
        - Holds no state once it has run
    """

    # Make the Pydantic instance immutable (read-only) for safety
    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Raw input line to evaluate")
    line_number: int = Field(..., ge=1, description="Position of the line in the session")

    def run(self) -> LineOutcome:
        """
        Evaluate the expression and wrap the result or the error.

        Only calculator errors are turned into outcomes; anything else is a bug and propagates.

        :return: Outcome of the line
        :rtype: LineOutcome
        """
        expression = self.expression.strip()
        logger.debug("👷🏁 Worker started on line %d: %r", self.line_number, expression)

        try:
            operation = ExpressionParser.parse(expression)
            result = StringEvaluator.evaluate(operation)
        except CalculatorError as exc:
            logger.info("👷❌ Worker failed on line %d: %s", self.line_number, exc)
            return LineOutcome(expression=expression, error=str(exc))

        logger.debug("👷✅ Worker finished on line %d: %r", self.line_number, result)
        return LineOutcome(expression=expression, result=result)
