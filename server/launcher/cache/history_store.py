import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from ..config import settings
from ..utils.path_manager import PathManager
from .arc_cache import ArcCache

logger = logging.getLogger(__name__)


class HistoryStore:
    """
    JSON-file persistence for the recommendation cache.

    - One record per file: ``{t1, t2, b1, b2, p, capacity}``
    - Writes go to a temp file first, then ``os.replace`` (no torn files)
    - Never raises: a bad or missing file yields an empty cache
    """

    def __init__(self, path: Optional[Path] = None):
        if path is None:
            path = PathManager(settings.data_dir).get_history_path(settings.history_file_name)
        self.path = Path(path)

    def _read(self) -> Optional[Any]:
        if not self.path.exists():
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("[HistoryStore] unreadable history at %s: %s", self.path, e)
            return None

    def load(self, capacity: Optional[int] = None) -> ArcCache:
        """Load the persisted cache (fresh one if missing or malformed)."""
        capacity = capacity if capacity is not None else settings.arc_capacity
        data = self._read()
        arc = ArcCache.from_export(data, capacity=capacity)
        logger.info("[HistoryStore] loaded %r from %s", arc, self.path)
        return arc

    def save(self, arc: ArcCache) -> bool:
        """Persist ``arc``. Returns False (and logs) on I/O failure."""
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=self.path.name, suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(arc.export(), f, ensure_ascii=False)
            os.replace(tmp_name, self.path)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error("[HistoryStore] failed to save history to %s: %s", self.path, e)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)
            return False

    def clear(self) -> None:
        """Remove the history file if present."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
