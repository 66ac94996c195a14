"""
Mapping between normalized page-relative rectangles and page coordinates.

Normalized rectangles have their origin at the top-left of the page and are
expressed against the reference frame they were captured in. Native PDF page
space has its origin at the bottom-left and uses absolute units.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from inkpress.core.annotations.models import NormalizedPosition, NormalizedRect


@dataclass(frozen=True)
class PageBox:
    """A box in native page space (bottom-left origin)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def top(self) -> float:
        return self.y + self.height

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass(frozen=True)
class ViewportBox:
    """A box in viewport pixels (top-left origin)."""
    left: float
    top: float
    width: float
    height: float


def scale_ratios(rect: NormalizedRect, page_width: float,
                 page_height: float) -> Tuple[float, float]:
    """Return the (x, y) scale factors from the rect's frame to the page."""
    return page_width / rect.page_width, page_height / rect.page_height


def to_page_space(rect: NormalizedRect, page_width: float,
                  page_height: float) -> PageBox:
    """
    Map a normalized rectangle onto a page of the given size.

    Each axis is scaled independently and the vertical axis is flipped.
    No rounding is applied.

    Args:
        rect: Rectangle captured in its own reference frame
        page_width: Target page width in native units
        page_height: Target page height in native units

    Returns:
        The box in native page space
    """
    x_ratio, y_ratio = scale_ratios(rect, page_width, page_height)

    x = rect.x1 * x_ratio
    width = (rect.x2 - rect.x1) * x_ratio
    height = (rect.y2 - rect.y1) * y_ratio
    y = page_height - rect.y1 * y_ratio - height

    return PageBox(x=x, y=y, width=width, height=height)


def from_page_space(box: PageBox, page_width: float, page_height: float,
                    page_number: int, ref_width: Optional[float] = None,
                    ref_height: Optional[float] = None) -> NormalizedRect:
    """
    Inverse of to_page_space.

    Args:
        box: Box in native page space
        page_width: Width of the page the box lives on
        page_height: Height of the page the box lives on
        page_number: 1-based page number to stamp on the result
        ref_width: Reference frame width (defaults to page_width)
        ref_height: Reference frame height (defaults to page_height)

    Returns:
        The normalized rectangle in the requested reference frame
    """
    ref_width = page_width if ref_width is None else ref_width
    ref_height = page_height if ref_height is None else ref_height
    x_ratio = page_width / ref_width
    y_ratio = page_height / ref_height

    x1 = box.x / x_ratio
    y1 = (page_height - box.y - box.height) / y_ratio
    return NormalizedRect(
        x1=x1,
        y1=y1,
        x2=x1 + box.width / x_ratio,
        y2=y1 + box.height / y_ratio,
        page_width=ref_width,
        page_height=ref_height,
        page_number=page_number,
    )


def viewport_to_normalized(box: ViewportBox, viewport_width: float,
                           viewport_height: float, page_number: int) -> NormalizedRect:
    """Capture a viewport box against the viewport's current page size."""
    return NormalizedRect(
        x1=box.left,
        y1=box.top,
        x2=box.left + box.width,
        y2=box.top + box.height,
        page_width=viewport_width,
        page_height=viewport_height,
        page_number=page_number,
    )


def normalized_to_viewport(rect: NormalizedRect, viewport_width: float,
                           viewport_height: float) -> ViewportBox:
    """Replay a normalized rectangle onto a viewport of a different size."""
    x_ratio, y_ratio = scale_ratios(rect, viewport_width, viewport_height)
    return ViewportBox(
        left=rect.x1 * x_ratio,
        top=rect.y1 * y_ratio,
        width=rect.width * x_ratio,
        height=rect.height * y_ratio,
    )


def viewport_position_to_normalized(bounding: ViewportBox, rects, viewport_width: float,
                                    viewport_height: float, page_number: int) -> NormalizedPosition:
    """Normalize a bounding box plus its per-line boxes in one go."""
    return NormalizedPosition(
        bounding_rect=viewport_to_normalized(
            bounding, viewport_width, viewport_height, page_number),
        rects=tuple(
            viewport_to_normalized(rect, viewport_width, viewport_height, page_number)
            for rect in rects
        ),
    )


def normalized_position_to_viewport(position: NormalizedPosition, viewport_width: float,
                                    viewport_height: float):
    """
    Returns:
        Tuple of (bounding ViewportBox, list of sub-rect ViewportBoxes)
    """
    bounding = normalized_to_viewport(position.bounding_rect, viewport_width, viewport_height)
    rects = [normalized_to_viewport(rect, viewport_width, viewport_height)
             for rect in position.rects]
    return bounding, rects
