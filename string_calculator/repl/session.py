"""Interactive read-evaluate-print session of the string calculator."""
import sys
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from string_calculator.common.logger import logger
from string_calculator.common.models import LineOutcome
from string_calculator.repl.worker import LineWorker


BANNER_TITLE = "String Calculator"
BANNER_SEPARATOR = "---------------------"
DEFAULT_PROMPT = "-> "
EXIT_COMMAND = "exit"
RESULT_LABEL = "Результат:"
ERROR_LABEL = "Ошибка:"
READ_ERROR_LABEL = "Ошибка при вводе:"


class CalculatorSession(BaseModel):
    """
    Line-oriented session reading expressions and printing their results.

    Features:
        - Prints a two-line banner once, then a prompt before every read.
        - Hands each line to a fresh LineWorker; no state is shared between lines.
        - Reports parse and evaluation errors and keeps going.
        - Stops on ``exit``, at end of input, or after too many consecutive read failures.
    """

    # Make the Pydantic instance immutable (read-only); streams are plain file-like objects
    model_config = ConfigDict(frozen=True)

    input_stream: Any = Field(default_factory=lambda: sys.stdin, description="Text stream lines are read from")
    output_stream: Any = Field(default_factory=lambda: sys.stdout, description="Text stream results are written to")
    prompt: str = Field(default=DEFAULT_PROMPT, description="Prompt written before each read")
    max_read_failures: int = Field(
        default=3, ge=1, description="Consecutive read failures tolerated before the session stops"
    )

    def _write(self, text: str, newline: bool = True) -> None:
        """
        Write text to the output stream and flush it.

        :param str text: Text to write
        :param bool newline: Append a line break when True
        """
        self.output_stream.write(text + ("\n" if newline else ""))
        self.output_stream.flush()

    @staticmethod
    def render(outcome: LineOutcome) -> str:
        """
        Turn a line outcome into the line shown to the user.

        :param LineOutcome outcome: Outcome returned by a worker

        :return: Display line
        :rtype: str
        """
        if outcome.ok:
            return f"{RESULT_LABEL} {outcome.result}"
        return f"{ERROR_LABEL} {outcome.error}"

    def run(self) -> None:
        """
        Run the session until the user exits or input ends.

        Steps:
            1. Print the banner.
            2. Print the prompt and read one line.
            3. Stop on ``exit`` or end of input.
            4. Evaluate the line and print the result or the error.

        :return: None
        """
        logger.info("🧮 Session started")
        self._write(BANNER_TITLE)
        self._write(BANNER_SEPARATOR)

        line_number = 0
        read_failures = 0
        while True:
            self._write(self.prompt, newline=False)

            try:
                raw_line: str = self.input_stream.readline()
            except (OSError, UnicodeDecodeError) as exc:
                read_failures += 1
                logger.error("📥❌ Read failure %d/%d: %s", read_failures, self.max_read_failures, exc)
                self._write(f"{READ_ERROR_LABEL} {exc}")
                if read_failures >= self.max_read_failures:
                    logger.error("📥❌ Too many consecutive read failures, stopping")
                    return
                continue
            read_failures = 0

            # readline() returns an empty string only at end of input
            if raw_line == "":
                logger.info("📥 End of input")
                self._write("")
                return

            if raw_line.strip() == EXIT_COMMAND:
                logger.info("🧮 Exit requested")
                return

            line_number += 1
            outcome = LineWorker(expression=raw_line, line_number=line_number).run()
            self._write(self.render(outcome))
