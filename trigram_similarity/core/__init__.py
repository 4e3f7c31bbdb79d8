"""
Normalization, trigram extraction and similarity scoring.
"""

from .normalize import PADDING, normalize
from .similarity import jaccard, similarity
from .trigrams import trigrams

__all__ = [
    "PADDING",
    "normalize",
    "trigrams",
    "jaccard",
    "similarity",
]
