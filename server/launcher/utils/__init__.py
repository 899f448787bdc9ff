from .logging_setup import configure_logging
from .path_manager import PathManager

__all__ = ["PathManager", "configure_logging"]
