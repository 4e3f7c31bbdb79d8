"""
Result type produced by the fuzzy word scanner.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Match:
    """
    A single fuzzy word hit inside a haystack.

    `start()`/`end()` are byte offsets into the UTF-8 encoded haystack, so
    `haystack.encode()[m.start():m.end()] == m.text().encode()`. `span()` gives
    the same word as `str` indices, for slicing the haystack directly.

    Attributes:
        word: The matched haystack word, unnormalized
        offset: Index of the word's first character in the haystack `str`
        score: Similarity between the needle and the word
        byte_start: Byte offset of the word in the UTF-8 encoded haystack
        byte_end: Byte offset just past the word in the encoded haystack
    """
    word: str
    offset: int
    score: float
    byte_start: int
    byte_end: int

    def start(self) -> int:
        return self.byte_start

    def end(self) -> int:
        return self.byte_end

    def span(self) -> tuple[int, int]:
        """`(start, end)` as `str` indices: `haystack[slice(*m.span())] == m.text()`."""
        return self.offset, self.offset + len(self.word)

    def text(self) -> str:
        return self.word

    def to_dict(self) -> dict:
        """Convert to a plain dictionary, e.g. for JSON output"""
        return {
            "word": self.word,
            "start": self.start(),
            "end": self.end(),
            "span": self.span(),
            "score": self.score,
        }

    def __str__(self) -> str:
        return f"{self.start()} {self.end()} {self.word}"
