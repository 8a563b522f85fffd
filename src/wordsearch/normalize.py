from __future__ import annotations

# One char may be stripped from each end of a token.
LEADING_PUNCT = frozenset("\"'([{")
TRAILING_PUNCT = frozenset(";.,\"'?!)]}")


def normalize(token: str) -> str:
    """
    Strip a single leading quote/opening bracket and a single trailing
    punctuation char from a raw token.

    Only one char is removed from each end, so ``'"hi!"'`` becomes ``'hi!'``.
    Internal punctuation (``don't``, ``well-known``) is kept. A token that
    collapses to nothing (``"("``, ``"'"``, ``"()"``) yields ``""``.

    >>> normalize("(cat).")
    'cat)'
    >>> normalize("sat.")
    'sat'
    """
    start, end = 0, len(token)
    if start < end and token[0] in LEADING_PUNCT:
        start += 1
    if start < end and token[-1] in TRAILING_PUNCT:
        end -= 1
    if start >= end:
        return ""
    return token[start:end]
