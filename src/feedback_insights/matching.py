"""Shared keyword matching utilities for the analytics rules.

Matching is plain substring containment on already-lowercased tokens:
"value" matches "valued", "add" matches "additional". Callers rely on this
exact behavior, so there is no word-boundary handling here.
"""

from typing import Iterable, Sequence


def count_keyword_hits(token: str, keywords: Iterable[str]) -> int:
    """Number of keywords contained in token (each keyword counts once)."""
    return sum(1 for kw in keywords if kw in token)


def matches_any_keyword(token: str, keywords: Iterable[str]) -> bool:
    """True if token contains at least one keyword."""
    return any(kw in token for kw in keywords)


def filter_tokens(tokens: Sequence[str], keywords: Iterable[str]) -> list[str]:
    """Tokens containing at least one keyword, in order."""
    kws = tuple(keywords)
    return [t for t in tokens if matches_any_keyword(t, kws)]


def matched_keywords(tokens: Sequence[str], keywords: Iterable[str]) -> list[str]:
    """Keywords (in table order) found in at least one token."""
    return [kw for kw in keywords if any(kw in t for t in tokens)]


def keyword_frequencies(tokens: Sequence[str], keywords: Iterable[str]) -> dict[str, int]:
    """
    Count, per keyword, the tokens containing it.
    Keys are ordered by first occurrence (token order, then table order),
    which makes the tie order of a stable sort reproducible.
    """
    kws = tuple(keywords)
    freq: dict[str, int] = {}
    for token in tokens:
        for kw in kws:
            if kw in token:
                freq[kw] = freq.get(kw, 0) + 1
    return freq


def top_keywords(frequencies: dict[str, int], n: int = 3) -> list[str]:
    """Top n keywords by descending count; ties keep insertion order."""
    ranked = sorted(frequencies.items(), key=lambda kv: kv[1], reverse=True)
    return [kw for kw, _ in ranked[:n]]
