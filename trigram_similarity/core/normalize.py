"""
Canonical comparison form for trigram extraction.
"""
import re

# Sentinel written at the string boundaries and in place of every non-word run.
PADDING = "  "

_NON_WORD_RE = re.compile(r"\W+")


def normalize(text: str) -> str:
    """
    Lowercase `text`, pad both ends and collapse every run of non-word
    characters after the first character to PADDING.

    This is pg_trgm's replacement of `^|$|\\W+`: the empty start-of-string
    match wins at index 0, so the first character is always kept, and a
    trailing non-word run already supplies the end padding:

        normalize("Figaro?")   -> "  figaro  "
        normalize("sir, sly")  -> "  sir  sly  "
        normalize("!a")        -> "  !a  "
        normalize("")          -> "  "
        normalize("?!")        -> "  ?  "
    """
    if not text:
        return PADDING
    head, rest = text[0], text[1:]
    body = head + _NON_WORD_RE.sub(PADDING, rest)
    if not (rest and _NON_WORD_RE.match(rest[-1])):
        body += PADDING
    return (PADDING + body).lower()
