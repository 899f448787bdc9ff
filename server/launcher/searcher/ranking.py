"""
Ranking pipeline: turns (candidates, query) into the list the launcher shows.

    empty query  → recommended candidates (ARC T2, most recent first)
    otherwise    → every matching candidate, best match first

The pipeline only reads the cache. Recording a launch is the caller's job:
    arc.access(candidate.key, candidate)
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..cache.arc_cache import ArcCache
from ..config import settings
from ..schemas import Candidate, MatchResult
from .matcher import best_match, match_sort_key

logger = logging.getLogger(__name__)

UNINSTALLER_KEYWORDS: Tuple[str, ...] = ("卸载", "uninstall", "remove", "删除")
_SHORTCUT_SUFFIX = ".lnk"


def _is_shortcut(candidate: Candidate) -> bool:
    return (candidate.launch_path or "").lower().endswith(_SHORTCUT_SUFFIX)


def dedupe_candidates(candidates: Iterable[Candidate]) -> List[Candidate]:
    """
    Drop uninstallers and collapse candidates that share a display name.

    Names compare case-insensitively. The first candidate per name wins,
    except that a direct executable replaces a ``.lnk`` shortcut.
    """
    by_name: Dict[str, Candidate] = {}
    for candidate in candidates:
        name = candidate.name.lower()
        if any(keyword in name for keyword in UNINSTALLER_KEYWORDS):
            continue

        existing = by_name.get(name)
        if existing is None:
            by_name[name] = candidate
        elif _is_shortcut(existing) and not _is_shortcut(candidate):
            by_name[name] = candidate

    return list(by_name.values())


def recommended(
    candidates: Sequence[Candidate],
    arc: ArcCache,
    limit: Optional[int] = None,
) -> List[Candidate]:
    """Recommended candidates still present in ``candidates``, most recent first."""
    limit = limit if limit is not None else settings.max_recommended
    current = {candidate.key: candidate for candidate in candidates}

    result: List[Candidate] = []
    for entry in arc.recommended_entries():
        candidate = current.get(entry.key)
        if candidate is None:
            continue
        result.append(candidate)
        if len(result) >= limit:
            break
    return result


def rank_matches(
    candidates: Sequence[Candidate],
    query: str,
    limit: Optional[int] = None,
    field_weights: Optional[Dict[str, int]] = None,
    schemes: Optional[Iterable[str]] = None,
) -> List[Tuple[Candidate, MatchResult]]:
    """Matching candidates with their match details, best first."""
    limit = limit if limit is not None else settings.max_results
    needle = query.strip().lower()
    if not needle:
        return []
    schemes = tuple(schemes) if schemes is not None else None

    matched: List[Tuple[Candidate, MatchResult]] = []
    for candidate in candidates:
        result = best_match(candidate, needle, field_weights, schemes)
        if result is not None:
            matched.append((candidate, result))

    # list.sort is stable: input order breaks any remaining tie.
    matched.sort(key=lambda pair: match_sort_key(pair[1], pair[0]))
    logger.debug("[Ranking] '%s': %d/%d matched", needle, len(matched), len(candidates))
    return matched[:limit]


def rank(
    candidates: Sequence[Candidate],
    query: str,
    arc: ArcCache,
    max_results: Optional[int] = None,
    max_recommended: Optional[int] = None,
    field_weights: Optional[Dict[str, int]] = None,
    schemes: Optional[Iterable[str]] = None,
) -> List[Candidate]:
    """
    Order ``candidates`` for display.

    Args:
        candidates:      Current candidate list (already deduplicated if wanted).
        query:           Raw query text; surrounding whitespace is ignored.
        arc:             Recommendation cache, read only.
        max_results:     Cap for a non-empty query (default settings.max_results).
        max_recommended: Cap for an empty query (default settings.max_recommended).

    Returns:
        Candidates in display order. Never raises for empty inputs.
    """
    if not query or not query.strip():
        return recommended(candidates, arc, max_recommended)
    return [
        candidate
        for candidate, _ in rank_matches(candidates, query, max_results, field_weights, schemes)
    ]
