"""Label filtering for the type-to-filter picker.

Substring hits rank first (earlier and shorter is better); when nothing
contains the query, ordered-subsequence fuzzy scoring is used instead.
"""

from __future__ import annotations


def fuzzy_score(query: str, candidate: str) -> int | None:
    if not query:
        return 0
    query_folded = query.casefold()
    candidate_folded = candidate.casefold()

    score = 0
    prev_idx = -1
    run = 0
    for needle in query_folded:
        idx = candidate_folded.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        if idx == prev_idx + 1:
            run += 1
            score += 20 + min(16, run * 4)
        else:
            run = 0
            score -= min(40, (idx - prev_idx - 1) * 2)
        # Word starts in package names (``@scope/name``, ``lodash.get``) weigh more.
        if idx == 0 or candidate_folded[idx - 1] in "/_-.@ ":
            score += 35
        prev_idx = idx

    score -= len(candidate_folded) // 5
    return score


def substring_index(query: str, candidate: str) -> int | None:
    if not query:
        return 0
    idx = candidate.casefold().find(query.casefold())
    if idx < 0:
        return None
    return idx


def fuzzy_match_labels(query: str, labels: list[str], limit: int | None = None) -> list[tuple[int, str, int]]:
    """Return ``(index, label, score)`` for labels matching ``query``, best first.

    Empty labels never match a non-empty query. An empty query keeps every
    label in its original order.
    """
    max_results = len(labels) if limit is None else max(1, limit)
    if not query:
        return [(idx, label, 0) for idx, label in enumerate(labels)][:max_results]

    substring_scored: list[tuple[int, int, str, int]] = []
    for idx, label in enumerate(labels):
        substr_idx = substring_index(query, label)
        if substr_idx is None:
            continue
        substring_scored.append((substr_idx, len(label), label, idx))
    if substring_scored:
        substring_scored.sort(key=lambda item: (item[0], item[1], item[2]))
        return [
            (label_idx, label, 10_000 - (substr_idx * 50) - label_len)
            for substr_idx, label_len, label, label_idx in substring_scored[:max_results]
        ]

    scored: list[tuple[int, int, str, int]] = []
    for idx, label in enumerate(labels):
        score = fuzzy_score(query, label)
        if score is None:
            continue
        scored.append((score, len(label), label, idx))
    scored.sort(key=lambda item: (-item[0], item[1], item[2]))
    return [(idx, label, score) for score, _, label, idx in scored[:max_results]]


__all__ = [
    "fuzzy_score",
    "substring_index",
    "fuzzy_match_labels",
]
