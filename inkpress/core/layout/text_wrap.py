"""
Greedy line wrapping with a character-level fallback.

Lines produced here are burned into fixed-size boxes without clipping, so no
breakable line may exceed the width budget. A word that cannot fit on a line
of its own is split between graphemes.
"""
import unicodedata
from functools import lru_cache
from typing import Callable, Iterator

import fitz  # PyMuPDF

Measure = Callable[[str], float]

# PyMuPDF's Base-14 Helvetica, the only font used for burned-in text
FONT_NAME = "helv"


def iter_graphemes(word: str) -> Iterator[str]:
    """Yield user-perceived characters: a base character plus its combining marks."""
    cluster = ""
    for char in word:
        if cluster and unicodedata.combining(char):
            cluster += char
            continue
        if cluster:
            yield cluster
        cluster = char
    if cluster:
        yield cluster


def wrap_text(text: str, measure: Measure, max_width: float) -> Iterator[str]:
    """
    Lazily wrap text into lines no wider than max_width.

    Args:
        text: Text to wrap; explicit newlines always start a new line
        measure: Returns the rendered width of a string
        max_width: Width budget per line

    Yields:
        Lines in reading order. Blank paragraphs yield an empty line.
    """
    if max_width <= 0 or not text:
        return

    for paragraph in text.replace("\r\n", "\n").split("\n"):
        words = paragraph.split()
        if not words:
            yield ""
            continue

        line = ""
        for word in words:
            candidate = f"{line} {word}" if line else word
            if measure(candidate) <= max_width:
                line = candidate
                continue

            if line:
                yield line
                line = ""

            if measure(word) <= max_width:
                line = word
                continue

            # Unbreakable at word level, grow a run one grapheme at a time
            run = ""
            for grapheme in iter_graphemes(word):
                candidate = run + grapheme
                if run and measure(candidate) > max_width:
                    yield run
                    run = grapheme
                else:
                    run = candidate
            # Partial run may still share a line with the next word
            line = run

        if line:
            yield line


@lru_cache(maxsize=1)
def _helvetica() -> fitz.Font:
    return fitz.Font(FONT_NAME)


def helvetica_measure(font_size: float) -> Measure:
    """Return a measure function for Helvetica at the given size."""
    font = _helvetica()

    def measure(value: str) -> float:
        return font.text_length(value, fontsize=font_size)

    return measure
