"""
Base class for per-entity conversion handlers.

A target adapter owns one handler per entity type. Handlers share the body
rewriting and document formatting so that agents and commands are treated
identically.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence

from core.frontmatter import format_frontmatter
from core.naming import PathRewrite, rewrite_paths
from core.target_interface import EntityType

logger = logging.getLogger(__name__)


class EntityHandler(ABC):
    """Converts one kind of plugin entity for a target."""

    def __init__(self, path_rewrites: Sequence[PathRewrite] = ()):
        self.path_rewrites = list(path_rewrites)
        self.warnings: List[str] = []

    @property
    @abstractmethod
    def entity_type(self) -> EntityType:
        """Entity type this handler converts."""

    @abstractmethod
    def convert(self, entity: Any) -> Any:
        """Convert a single source entity to its bundle entry."""

    def reset_warnings(self):
        self.warnings = []

    def warn(self, message: str):
        logger.debug(message)
        self.warnings.append(message)

    def build_document(self, header: Dict[str, Any], body: str) -> str:
        """Trim body, rewrite source paths and prepend the YAML header."""
        rewritten = rewrite_paths(body.strip(), self.path_rewrites)
        return format_frontmatter(header, rewritten)
