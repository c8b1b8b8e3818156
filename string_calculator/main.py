"""
Command-line entrypoint of the string calculator.

This script:
- Starts an interactive session on stdin/stdout
- Returns normally on ``exit``, end of input or Ctrl-C, so the process exits with code 0
"""
import sys

from string_calculator.common.logger import logger
from string_calculator.repl.session import CalculatorSession


def main() -> None:
    """
    Main function executed by the ``string-calculator`` console script.
    """
    session = CalculatorSession()
    try:
        session.run()
    except KeyboardInterrupt:
        # Leave the terminal on a fresh line
        sys.stdout.write("\n")
        logger.info("🧮 Interrupted by user")


if __name__ == "__main__":
    main()
