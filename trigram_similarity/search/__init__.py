"""
Fuzzy word search over larger texts.
"""

from .scanner import Matches, find_words

__all__ = [
    "Matches",
    "find_words",
]
