"""
Color string parsing.
"""
import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

_RGBA_PATTERN = re.compile(
    r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([\d.]+)\s*)?\)"
)
_HEX_DIGITS = set("0123456789abcdefABCDEF")


@dataclass(frozen=True)
class RGBA:
    """Color with every channel in [0, 1]."""
    r: float
    g: float
    b: float
    a: float = 1.0

    @property
    def rgb(self) -> Tuple[float, float, float]:
        """Color triple in the form PyMuPDF drawing calls expect."""
        return (self.r, self.g, self.b)

    @property
    def opacity(self) -> float:
        return self.a


# Warm yellow, same as the built-in highlight color
FALLBACK_COLOR = RGBA(1.0, 0.89, 0.56, 0.5)


def _unit(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def parse_color(value: Optional[str]) -> RGBA:
    """
    Parse a CSS-like color string.

    Accepts rgb(r, g, b), rgba(r, g, b, a), #rgb and #rrggbb. Anything else
    yields FALLBACK_COLOR; this function never raises.

    Args:
        value: The color string

    Returns:
        The parsed color
    """
    if not value:
        return FALLBACK_COLOR

    match = _RGBA_PATTERN.search(value)
    if match:
        red, green, blue, alpha = match.groups()
        try:
            a = float(alpha) if alpha else 1.0
        except ValueError:
            # e.g. "0.5.1"
            logger.debug("Unparsable alpha in color %r, using fallback", value)
            return FALLBACK_COLOR
        return RGBA(
            r=_unit(int(red) / 255),
            g=_unit(int(green) / 255),
            b=_unit(int(blue) / 255),
            a=_unit(a),
        )

    hex_value = value.strip().replace("#", "", 1)
    if hex_value and set(hex_value) <= _HEX_DIGITS:
        if len(hex_value) == 3:
            return RGBA(
                r=int(hex_value[0] * 2, 16) / 255,
                g=int(hex_value[1] * 2, 16) / 255,
                b=int(hex_value[2] * 2, 16) / 255,
            )
        if len(hex_value) == 6:
            return RGBA(
                r=int(hex_value[0:2], 16) / 255,
                g=int(hex_value[2:4], 16) / 255,
                b=int(hex_value[4:6], 16) / 255,
            )

    logger.debug("Unrecognized color %r, using fallback", value)
    return FALLBACK_COLOR
