"""
LauncherSession: one user's launcher state.

Owns the recommendation cache and its history file, and is the single lock
boundary around them: searches read the cache under the lock, launches mutate
it under the lock and persist right after.

    session = LauncherSession()
    session.search(candidates, "wx")      # ranked candidates
    session.search(candidates, "")        # recommendations
    session.record_launch(candidate)      # update + persist
"""

import logging
import threading
from typing import Any, Dict, List, Optional, Sequence

from ..cache.arc_cache import ArcCache
from ..cache.history_store import HistoryStore
from ..config import Settings, settings as default_settings
from ..schemas import Candidate
from ..searcher.ranking import dedupe_candidates, rank
from ..utils.logging_setup import configure_logging
from ..utils.path_manager import PathManager

logger = logging.getLogger(__name__)


class LauncherSession:

    def __init__(
        self,
        store: Optional[HistoryStore] = None,
        arc: Optional[ArcCache] = None,
        config: Optional[Settings] = None,
    ):
        self.settings = config or default_settings
        self.store = store
        if arc is not None:
            self.arc = arc
        elif store is not None:
            self.arc = store.load(self.settings.arc_capacity)
        else:
            self.arc = ArcCache(self.settings.arc_capacity)
        self._lock = threading.Lock()

    @classmethod
    def from_disk(cls, config: Optional[Settings] = None) -> "LauncherSession":
        """Session backed by the default history file, with logging configured."""
        config = config or default_settings
        configure_logging(config.log_level)
        path = PathManager(config.data_dir).get_history_path(config.history_file_name)
        return cls(store=HistoryStore(path), config=config)

    def search(self, candidates: Sequence[Candidate], query: str, dedupe: bool = True) -> List[Candidate]:
        pool = dedupe_candidates(candidates) if dedupe else list(candidates)
        with self._lock:
            return rank(
                pool,
                query,
                self.arc,
                max_results=self.settings.max_results,
                max_recommended=self.settings.max_recommended,
                field_weights=self.settings.field_weights,
                schemes=self.settings.shuangpin_schemes,
            )

    def recommended(self, candidates: Sequence[Candidate]) -> List[Candidate]:
        return self.search(candidates, "")

    def record_launch(self, candidate: Candidate) -> bool:
        """
        Record that ``candidate`` was launched.

        Returns:
            True if the updated history was persisted (or there is no store).
        """
        payload: Dict[str, Any] = candidate.model_dump()
        with self._lock:
            self.arc.access(candidate.key, payload)
            logger.info("[LauncherSession] launch recorded: %s (%r)", candidate.key, self.arc)
            if self.store is None:
                return True
            return self.store.save(self.arc)

    def reset(self) -> None:
        """Forget all launch history."""
        with self._lock:
            self.arc.clear()
            if self.store is not None:
                self.store.clear()
