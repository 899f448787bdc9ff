"""
launcher: Ranking engine for the desktop launcher.

Matches queries against application candidates (with Pinyin / Shuangpin
support for CJK labels) and recommends frequently used entries through an
Adaptive Replacement Cache when the query is empty.
"""

from launcher.cache import ArcCache, HistoryStore
from launcher.errors import ArcStateError, LauncherError, UnknownSchemeError
from launcher.schemas import Candidate, MatchKind, MatchResult
from launcher.searcher import best_match, dedupe_candidates, expand, rank
from launcher.services import LauncherSession

__all__ = [
    "ArcCache",
    "ArcStateError",
    "Candidate",
    "HistoryStore",
    "LauncherError",
    "LauncherSession",
    "MatchKind",
    "MatchResult",
    "UnknownSchemeError",
    "best_match",
    "dedupe_candidates",
    "expand",
    "rank",
]
