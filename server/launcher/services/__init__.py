from .launcher_session import LauncherSession

__all__ = ["LauncherSession"]
