"""Exceptions raised by the plugin conversion pipeline."""

from pathlib import Path
from typing import Union


class PluginConvertError(Exception):
    """Base exception for plugin conversion operations."""
    pass


class FrontmatterError(PluginConvertError, ValueError):
    """Raised when a document's YAML frontmatter cannot be parsed."""
    pass


class UnknownTargetError(PluginConvertError, KeyError):
    """Raised when a target dialect is not registered."""

    def __init__(self, target_name: str):
        super().__init__(target_name)
        self.target_name = target_name

    def __str__(self) -> str:
        return f"Unknown target format: {self.target_name}"


class BundleWriteError(PluginConvertError):
    """
    Raised when materializing a bundle fails.

    The underlying OSError is available as __cause__. Files written before
    the failure are left in place.
    """

    def __init__(self, message: str, path: Union[str, Path]):
        super().__init__(message)
        self.path = Path(path)
