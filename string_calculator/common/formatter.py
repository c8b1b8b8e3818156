"""Display formatting of evaluation results."""
from string_calculator.common.models import DISPLAY_BUDGET, OVERFLOW_MARKER


def format_result(result: str, budget: int = DISPLAY_BUDGET) -> str:
    """
    Cut a result down to the display budget.

    Results longer than ``budget`` characters keep their first ``budget``
    characters followed by ``...``; shorter results are returned unchanged.

    :param str result: Raw evaluation result
    :param int budget: Maximum number of result characters shown

    :return: Display-ready result
    :rtype: str
    """
    if len(result) > budget:
        return result[:budget] + OVERFLOW_MARKER
    return result
