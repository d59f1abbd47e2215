"""
Abstract interface implemented by every target dialect.

A target dialect knows how to:
- Convert a ClaudePlugin into a TargetBundle (pure, no I/O)
- Write a TargetBundle to disk in the target tool's directory layout
- Report non-fatal conversion warnings (unmapped tools, synthesized fields)

See targets/qoder for a working implementation.
"""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from core.bundle_models import TargetBundle
from core.options import ConversionOptions
from core.plugin_models import ClaudePlugin


class EntityType(Enum):
    """Kinds of plugin entities a target can materialize."""
    AGENT = 'agent'
    COMMAND = 'command'
    SKILL = 'skill'


class TargetDialect(ABC):
    """Base class for target dialects."""

    @property
    @abstractmethod
    def target_name(self) -> str:
        """Unique identifier for this target, e.g. 'qoder'."""

    @property
    @abstractmethod
    def output_dir_name(self) -> str:
        """Config directory the target tool reads from, e.g. '.qoder'."""

    @property
    @abstractmethod
    def supported_entity_types(self) -> List[EntityType]:
        """Which plugin entities this target converts."""

    def can_handle(self, output_root: Path) -> bool:
        """Check whether output_root already points at this target's config dir."""
        return Path(output_root).name == self.output_dir_name

    @abstractmethod
    def convert(self, plugin: ClaudePlugin,
                options: Optional[ConversionOptions] = None) -> TargetBundle:
        """
        Convert a plugin to this target's bundle.

        Must not perform I/O and must not raise for well-formed input.
        Options the target does not use are ignored.
        """

    @abstractmethod
    async def write(self, output_root: Union[str, Path], bundle: TargetBundle) -> None:
        """Materialize bundle under output_root."""

    @abstractmethod
    def get_conversion_warnings(self) -> List[str]:
        """Warnings from the most recent convert() call."""
