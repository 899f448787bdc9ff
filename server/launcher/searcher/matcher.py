"""
Match scorer: exact / prefix / fuzzy cost of a query against candidate fields.

Costs (lower is better):
    exact   0        value == query
    prefix  1        value starts with query
    fuzzy   2 + n    query is an in-order subsequence of value

Each field is compared through its literal value and all its phonetic
variants, so "wx" matches "微信" exactly through the initials variant.
A field's weight is added on top, which keeps a fuzzy name match ahead of an
exact path match.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from ..config import DEFAULT_FIELD_WEIGHTS, settings
from ..schemas import Candidate, FieldMatch, MatchKind, MatchResult
from .phonetic import expand

_EXACT_COST  = 0
_PREFIX_COST = 1
_FUZZY_BASE  = 2


def fuzzy_penalty(query: str, value: str) -> Optional[int]:
    """
    Penalty of the best in-order alignment of ``query`` inside ``value``.

    The penalty of an alignment is the index of its first matched character,
    plus the gaps between consecutive matched characters, plus the unmatched
    tail after the last one. Those three parts always add up to
    ``len(value) - len(query)``, so every valid alignment costs the same and
    only existence has to be checked.

    Returns None when ``query`` is not a subsequence of ``value``.
    """
    if len(query) > len(value):
        return None
    position = 0
    for char in query:
        position = value.find(char, position)
        if position == -1:
            return None
        position += 1
    return len(value) - len(query)


def _score_text(query: str, text: str) -> Optional[FieldMatch]:
    if text == query:
        return FieldMatch(MatchKind.EXACT, _EXACT_COST)
    if text.startswith(query):
        return FieldMatch(MatchKind.PREFIX, _PREFIX_COST)
    penalty = fuzzy_penalty(query, text)
    if penalty is None:
        return None
    return FieldMatch(MatchKind.FUZZY, _FUZZY_BASE + penalty)


def score_field(
    query: str,
    value: str,
    schemes: Optional[Iterable[str]] = None,
) -> Optional[FieldMatch]:
    """Best match of ``query`` against ``value`` and its phonetic variants."""
    needle = query.lower()
    haystacks = {value.lower()} | expand(value, schemes)

    best: Optional[FieldMatch] = None
    # Sorted so equal-cost variants always resolve the same way.
    for text in sorted(haystacks):
        match = _score_text(needle, text)
        if match is None:
            continue
        if best is None or match.base_cost < best.base_cost:
            best = match
            if best.base_cost == _EXACT_COST:
                break
    return best


def best_match(
    candidate: Candidate,
    query: str,
    field_weights: Optional[Dict[str, int]] = None,
    schemes: Optional[Iterable[str]] = None,
) -> Optional[MatchResult]:
    """
    Lowest-cost match of ``query`` over every field of ``candidate``.

    Ties on total cost go to the lower base cost, then to the lower field
    weight, then to the field listed first by ``Candidate.match_fields``.
    ``field_weights`` may cover only some fields; the rest keep their
    ``DEFAULT_FIELD_WEIGHTS`` value.
    """
    overrides = field_weights if field_weights is not None else settings.field_weights
    weights = {**DEFAULT_FIELD_WEIGHTS, **overrides}
    schemes = tuple(schemes) if schemes is not None else None

    best: Optional[MatchResult] = None
    for field, value in candidate.match_fields():
        match = score_field(query, value, schemes)
        if match is None:
            continue
        result = MatchResult(
            field=field,
            match_kind=match.match_kind,
            base_cost=match.base_cost,
            field_weight=weights[field],
        )
        # Strict comparison keeps the earlier field on a full tie.
        if best is None or result.rank_key < best.rank_key:
            best = result
    return best


def match_sort_key(result: MatchResult, candidate: Candidate) -> Tuple:
    """
    Sort key for ranked results.

    Match quality first, then usage: more launches, then most recent launch,
    then name. Callers sort stably, so input order settles anything left.
    """
    return (
        result.total_cost,
        result.base_cost,
        result.field_weight,
        -candidate.launch_count,
        -(candidate.last_launched_at or 0.0),
        candidate.name.casefold(),
    )
