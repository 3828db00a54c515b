"""Custom exception hierarchy for the relauncher."""


class RelauncherError(Exception):
    """Base exception for all relauncher errors."""


class EnumerationError(RelauncherError):
    """The OS process table could not be read."""


class TerminationError(RelauncherError):
    """A kill request was rejected (process gone, permission denied)."""


class LaunchError(RelauncherError):
    """The executable could not be resolved or started."""


class ConfigError(RelauncherError):
    """Errors related to configuration loading."""
