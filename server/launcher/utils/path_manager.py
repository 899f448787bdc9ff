import os
import platform
from pathlib import Path
from typing import Mapping, Optional


class PathManager:
    """
    Resolves the launcher's writable user-data locations per OS.
    Always uses Local paths (not Roaming).
    """

    APP_DIR_NAME = "Launcher"

    def __init__(self, data_dir: Optional[Path] = None, env: Optional[Mapping[str, str]] = None):
        """
        data_dir: explicit override (tests, portable installs)
        env: environment mapping; defaults to os.environ
        """
        self.env = env if env is not None else os.environ
        self.system = platform.system()
        self._setup_paths(data_dir)

    def _default_user_data_dir(self) -> Path:
        """Determine OS-specific writable user data directory (Local)."""
        if self.system == "Windows":
            return Path.home() / "AppData" / "Local" / self.APP_DIR_NAME
        elif self.system == "Darwin":
            return Path.home() / "Library" / "Application Support" / self.APP_DIR_NAME
        else:
            # Linux / Unix
            base = self.env.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
            return Path(base) / self.APP_DIR_NAME

    def _setup_paths(self, data_dir: Optional[Path]):
        if data_dir is not None:
            self.USER_DATA_DIR = Path(data_dir)
        else:
            self.USER_DATA_DIR = Path(self.env.get("LAUNCHER_DATA_DIR") or self._default_user_data_dir())

    # Accessors
    def get_user_data_dir(self) -> Path:
        return self.USER_DATA_DIR

    def get_history_path(self, file_name: str) -> Path:
        return self.USER_DATA_DIR / file_name
