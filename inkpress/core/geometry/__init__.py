"""
Coordinate conversion between normalized, viewport and page space.
"""
from .transform import (
    PageBox,
    ViewportBox,
    from_page_space,
    normalized_position_to_viewport,
    normalized_to_viewport,
    scale_ratios,
    to_page_space,
    viewport_position_to_normalized,
    viewport_to_normalized,
)

__all__ = [
    'PageBox',
    'ViewportBox',
    'from_page_space',
    'normalized_position_to_viewport',
    'normalized_to_viewport',
    'scale_ratios',
    'to_page_space',
    'viewport_position_to_normalized',
    'viewport_to_normalized',
]
