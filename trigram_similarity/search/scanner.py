"""
Lazy fuzzy search for the words of a haystack that resemble a needle.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from trigram_similarity.core.similarity import similarity
from trigram_similarity.data.match import Match

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"\w+")


class Matches(Iterator):
    """
    Iterator over the haystack words whose similarity to the needle is above
    the threshold.

    Each `next()` pulls words from the underlying word scan and scores them
    until one qualifies or the haystack runs out. Nothing is cached between
    instances; scanning the same haystack again means building a new one.

    Example:
        for m in Matches("buffalo", "bufalo Bungalo buffaloo", 0.3):
            print(m.start(), m.text())
    """

    def __init__(self, needle: str, haystack: str, threshold: float):
        self.needle = needle
        self.haystack = haystack
        self.threshold = threshold
        self._words = _WORD_RE.finditer(haystack)
        # Running character/byte position, so byte offsets never re-encode the prefix.
        self._char_pos = 0
        self._byte_pos = 0

    def _byte_offset(self, index: int) -> int:
        self._byte_pos += len(self.haystack[self._char_pos:index].encode("utf-8"))
        self._char_pos = index
        return self._byte_pos

    def __next__(self) -> Match:
        for word_match in self._words:
            word = word_match.group()
            score = similarity(self.needle, word)
            if score <= self.threshold:
                continue
            byte_start = self._byte_offset(word_match.start())
            byte_end = self._byte_offset(word_match.end())
            logger.debug(f"'{word}' at {word_match.start()} matches '{self.needle}' ({score:.3f})")
            return Match(
                word=word,
                offset=word_match.start(),
                score=score,
                byte_start=byte_start,
                byte_end=byte_end,
            )
        logger.debug(f"Scan for '{self.needle}' exhausted")
        raise StopIteration

    def __repr__(self) -> str:
        return f"Matches(needle={self.needle!r}, threshold={self.threshold})"


def find_words(needle: str, haystack: str, threshold: float | None = None) -> Matches:
    """
    Lazily find the words of `haystack` whose similarity to `needle` is
    strictly greater than `threshold`.

    Words are maximal runs of word characters, scanned left to right. Without
    an explicit threshold the configured `scanner.threshold` applies.

    An empty needle has no trigrams, so it only matches words that have none
    either; ordinary words never match it.
    """
    if threshold is None:
        from trigram_similarity import config
        threshold = config.cfg.scanner.threshold
    return Matches(needle, haystack, threshold)
