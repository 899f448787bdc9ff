import logging
from typing import Optional, Union

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """Attach one stream handler to the ``launcher`` logger (idempotent)."""
    if level is None:
        from ..config import settings
        level = settings.log_level

    logger = logging.getLogger("launcher")
    logger.setLevel(level)
    if any(getattr(h, "_launcher_handler", False) for h in logger.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._launcher_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
