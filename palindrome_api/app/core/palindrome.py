"""
Palindrome classification.

Two definitions are supported.  The strict definition compares raw
characters positionally, so case, punctuation and whitespace all count.
The normalized definition discards every character outside
``[A-Za-z0-9]`` and lowercases the remainder before applying the
strict check, so ``"A man, a plan, a canal: Panama"`` qualifies.

Both functions are pure and accept any string.
"""

import re

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]+")


def is_palindrome_strict(s: str) -> bool:
    """Return ``True`` if ``s`` reads the same forwards and backwards.

    An empty string is a palindrome; a single character is a palindrome;
    a string ``x y z`` is a palindrome if ``y`` is a palindrome and ``x``
    equals ``z``; nothing else is a palindrome.
    """
    length = len(s)
    for i in range(length // 2):
        if s[i] != s[length - i - 1]:
            return False
    return True


def is_palindrome(s: str) -> bool:
    """Lowercase ``s`` and drop non‑alphanumerics, then check it strictly."""
    return is_palindrome_strict(_NON_ALPHANUMERIC.sub("", s).lower())


def classify(s: str, strict: bool) -> bool:
    """Classify ``s`` under the strict or the normalized definition."""
    if strict:
        return is_palindrome_strict(s)
    return is_palindrome(s)
