"""Launcher exceptions."""


class LauncherError(Exception):
    """Base exception."""


class ArcStateError(LauncherError):
    """Persisted recommendation-cache state is malformed."""


class UnknownSchemeError(LauncherError, KeyError):
    """Requested Shuangpin scheme is not registered."""
