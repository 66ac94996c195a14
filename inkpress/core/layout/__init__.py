"""
Text layout for burned-in freetext.
"""
from .text_wrap import FONT_NAME, helvetica_measure, iter_graphemes, wrap_text

__all__ = ['FONT_NAME', 'helvetica_measure', 'iter_graphemes', 'wrap_text']
