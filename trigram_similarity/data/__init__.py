"""Data structures returned by trigram_similarity searches"""

from trigram_similarity.data.match import Match

__all__ = [
    "Match",
]
