import logging
from typing import List

from .index import TopKResult

logger = logging.getLogger(__name__)

VERTICAL = "\u2502"
CORNER = "\u2514"
HORIZONTAL = "\u2500"
BLOCK = "\u2591"

DEFAULT_BAR_WIDTH = 75
DEFAULT_AXIS_WIDTH = 80


def bar_length(frequency: int, scale_base: int, bar_width: int = DEFAULT_BAR_WIDTH) -> int:
    """floor(bar_width * frequency / scale_base), computed in integers."""
    if scale_base <= 0:
        return 0
    return (bar_width * frequency) // scale_base


def render_report(result: TopKResult, scaled: bool = False,
                  bar_width: int = DEFAULT_BAR_WIDTH, axis_width: int = DEFAULT_AXIS_WIDTH) -> str:
    """
    Renders ranked tokens as a horizontal bar chart.

    Each token takes two bar rows followed by a blank spacer row; a corner and
    horizontal axis close the chart. Bars are relative to the total token
    count, or to the largest displayed frequency when `scaled` is set.

    Args:
        result (TopKResult): Output of FrequencyIndex.extract_top_k().
        scaled (bool): Scale bars to the top frequency instead of the total.
        bar_width (int): Bar length for a token that equals the scale base.
        axis_width (int): Length of the closing axis line.

    Returns:
        str: The chart, newline-terminated.
    """
    if not result.entries or result.total_token_count <= 0:
        raise ValueError("Cannot render a report without ranked tokens.")

    if result.underfilled:
        logger.info(f"Showing {len(result.entries)} of {result.requested} requested token(s).")

    total = result.total_token_count
    scale_base = max(entry.frequency for entry in result.entries) if scaled else total
    label_width = max(len(entry.token) for entry in result.entries) + 1
    padding = " " * label_width

    lines: List[str] = []
    for entry in result.entries:
        bar = BLOCK * bar_length(entry.frequency, scale_base, bar_width)
        percentage = 100 * entry.frequency / total
        lines.append(f"{entry.token.ljust(label_width)}{VERTICAL}{bar}{percentage:.2f}%")
        lines.append(f"{padding}{VERTICAL}{bar}")
        lines.append(padding)
    lines.append(f"{padding}{CORNER}{HORIZONTAL * axis_width}")
    return "\n".join(lines) + "\n"
