from launcher.cache.arc_cache import ArcCache, ArcStats, CacheEntry
from launcher.cache.history_store import HistoryStore

__all__ = [
    "ArcCache",
    "ArcStats",
    "CacheEntry",
    "HistoryStore",
]
