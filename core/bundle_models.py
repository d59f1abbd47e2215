"""
Target bundle produced by a converter and consumed by a writer.

Every name in a bundle is already a normalized slug (see core.naming), so
writers can use it directly as a file or directory name.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class BundleFile:
    """A single generated document (agent or command)."""
    name: str
    content: str


@dataclass(frozen=True)
class BundleSkillDir:
    """A skill directory to be copied verbatim under the target's skills dir."""
    name: str
    source_dir: Path


@dataclass(frozen=True)
class TargetBundle:
    """Converted plugin, in the same order as the source plugin's entities."""
    agents: List[BundleFile] = field(default_factory=list)
    commands: List[BundleFile] = field(default_factory=list)
    skill_dirs: List[BundleSkillDir] = field(default_factory=list)

    def is_empty(self) -> bool:
        """True when writing this bundle would touch nothing."""
        return not (self.agents or self.commands or self.skill_dirs)
