"""
Qoder target - coordinator.

Delegates each entity type to its handler and writing to writer.py.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from core.bundle_models import TargetBundle
from core.naming import claude_path_rewrites
from core.options import ConversionOptions
from core.plugin_models import ClaudePlugin
from core.target_interface import EntityType, TargetDialect
from .handlers.agent_handler import QoderAgentHandler
from .handlers.command_handler import QoderCommandHandler
from .handlers.skill_handler import QoderSkillHandler
from .writer import QODER_DIR_NAME, write_qoder_bundle

logger = logging.getLogger(__name__)


class QoderTarget(TargetDialect):
    """
    Target dialect for Qoder.

    Qoder reads agents, commands and skills from a .qoder directory using
    the same Markdown + YAML frontmatter conventions as Claude, so conversion
    is mostly renaming and path rewriting. Conversion options are accepted
    but none of them change the output.
    """

    def __init__(self):
        """Initialize handlers for each entity type."""
        self.warnings: List[str] = []
        rewrites = claude_path_rewrites(QODER_DIR_NAME)
        self._handlers = {
            EntityType.AGENT: QoderAgentHandler(rewrites),
            EntityType.COMMAND: QoderCommandHandler(rewrites),
            EntityType.SKILL: QoderSkillHandler(),
        }

    @property
    def target_name(self) -> str:
        return "qoder"

    @property
    def output_dir_name(self) -> str:
        return QODER_DIR_NAME

    @property
    def supported_entity_types(self) -> List[EntityType]:
        return list(self._handlers.keys())

    def convert(self, plugin: ClaudePlugin,
                options: Optional[ConversionOptions] = None) -> TargetBundle:
        """Convert a Claude plugin to a Qoder bundle."""
        self.warnings = []
        for handler in self._handlers.values():
            handler.reset_warnings()

        if options is not None and options.extras:
            logger.debug("Ignoring unrecognized options: %s", ', '.join(sorted(options.extras)))

        agent_handler = self._handlers[EntityType.AGENT]
        command_handler = self._handlers[EntityType.COMMAND]
        skill_handler = self._handlers[EntityType.SKILL]

        bundle = TargetBundle(
            agents=[agent_handler.convert(agent) for agent in plugin.agents],
            commands=[command_handler.convert(command) for command in plugin.commands],
            skill_dirs=[skill_handler.convert(skill) for skill in plugin.skills],
        )

        for handler in self._handlers.values():
            self.warnings.extend(handler.warnings)

        logger.debug(
            "Converted plugin %s: %d agents, %d commands, %d skills",
            plugin.manifest.name, len(bundle.agents), len(bundle.commands), len(bundle.skill_dirs),
        )
        return bundle

    async def write(self, output_root: Union[str, Path], bundle: TargetBundle) -> None:
        """Write bundle to output_root (delegates to writer)."""
        await write_qoder_bundle(output_root, bundle)

    def get_conversion_warnings(self) -> List[str]:
        return self.warnings
