"""Recoverable error types.

Each type marks one failure site that degrades to "treat as absent"
instead of aborting a run.
"""

from pathlib import Path


class ManifestError(ValueError):
    """A candidate package manifest could not be used.

    Raised when the manifest is unreadable, is not a JSON object, or has no
    string ``name``. The scanner skips the candidate.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ConfigFileError(ValueError):
    """The project config file could not be used.

    The config loader keeps its defaults when this is raised.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
