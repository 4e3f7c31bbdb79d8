from __future__ import annotations

from trigram_similarity.core.normalize import PADDING


def trigrams(normalized: str) -> set[str]:
    """
    Return the set of 3-codepoint windows of an already normalized string.

    Windows ending in PADDING are skipped to agree with pg_trgm, which does not
    count trigrams made only of trailing padding. Python strings index by
    codepoint, so a window never splits a multi-byte character.
    """
    if len(normalized) < 3:
        return set()
    windows = (normalized[i:i + 3] for i in range(len(normalized) - 2))
    return {t for t in windows if not t.endswith(PADDING)}
