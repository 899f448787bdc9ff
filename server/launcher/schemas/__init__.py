from .candidate_schema import Candidate, FieldMatch, MatchKind, MatchResult
from .arc_schema import ArcSnapshot, CacheEntryModel

__all__ = [
    "ArcSnapshot",
    "CacheEntryModel",
    "Candidate",
    "FieldMatch",
    "MatchKind",
    "MatchResult",
]
