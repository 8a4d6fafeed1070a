"""Matching and ranking of recent workspaces against search terms.

Scoring (all comparisons case-insensitive):

1. If **every** term occurs in the workspace name, each term contributes 10.
   Precise matches in the name thus float to the top.
2. If **every** term occurs in the URL, each term contributes the relative
   position of its right-most occurrence, ``index / len(url)``.  URL paths go
   from least to most specific segment, so the farther right a term matches
   the more specific it is.

Both contributions are all-or-nothing: a single term missing from a field
zeroes that field's contribution.  The score is the sum of both; workspaces
scoring zero do not match.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from vscode_search.provider.models.workspace import RecentWorkspace

T = TypeVar("T")

NAME_MATCH_SCORE = 10.0


def _name_score(name: str, terms: Sequence[str]) -> float:
    if all(term in name for term in terms):
        return NAME_MATCH_SCORE * len(terms)
    return 0.0


def _url_score(url: str, terms: Sequence[str]) -> float:
    score = 0.0
    for term in terms:
        index = url.rfind(term)
        if index < 0:
            return 0.0
        score += index / len(url)
    return score


def match_score(workspace: RecentWorkspace, terms: Sequence[str]) -> float:
    """Compute the score of matching ``workspace`` against ``terms``."""
    lowered = [term.lower() for term in terms]
    if not lowered:
        return 0.0
    return _name_score(workspace.name.lower(), lowered) + _url_score(workspace.url.lower(), lowered)


def find_matching_workspaces(workspaces: Iterable[tuple[T, RecentWorkspace]], terms: Sequence[str]) -> list[T]:
    """Return the ids of all workspaces matching ``terms``, best match first.

    ``workspaces`` is any iterable of ``(id, workspace)`` pairs, e.g. the whole
    index or a subset of previous results.  Workspaces with a non-positive
    score are dropped.  The sort is stable, so workspaces with equal score
    keep their input order.
    """
    matches = []
    for id_, workspace in workspaces:
        score = match_score(workspace, terms)
        if score > 0:
            matches.append((score, id_))
    matches.sort(key=lambda match: match[0], reverse=True)
    return [id_ for _, id_ in matches]
