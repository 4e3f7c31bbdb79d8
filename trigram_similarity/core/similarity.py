"""
Trigram similarity in the manner of PostgreSQL's pg_trgm extension.
"""
from __future__ import annotations

from collections.abc import Hashable
from typing import AbstractSet

from trigram_similarity.core.normalize import normalize
from trigram_similarity.core.trigrams import trigrams


def jaccard(set_a: AbstractSet[Hashable], set_b: AbstractSet[Hashable]) -> float:
    """Jaccard index of two sets; two empty sets are identical (1.0)."""
    union = len(set_a | set_b)
    if union == 0:
        return 1.0
    return len(set_a & set_b) / union


def similarity(a: str, b: str) -> float:
    """
    Similarity of two strings as the Jaccard index of their trigram sets.

    The result lies in [0.0, 1.0], 1.0 meaning most similar. Inputs are
    normalized first, so distinct strings can score 1.0: "figaro" and
    "Figaro?" are fully similar.
    """
    return jaccard(trigrams(normalize(a)), trigrams(normalize(b)))
