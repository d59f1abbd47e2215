"""
Qoder command handler.

Claude command -> .qoder/commands/<name>.md

Namespaced commands are flattened: 'workflows:plan' becomes
'workflows-plan'. allowed-tools is copied as-is; Qoder commands use the
same tool names Claude does.
"""

import logging
from typing import Any, Dict

from core.bundle_models import BundleFile
from core.naming import normalize_name
from core.plugin_models import ClaudeCommand
from core.target_interface import EntityType
from targets.shared.entity_handler import EntityHandler

logger = logging.getLogger(__name__)


class QoderCommandHandler(EntityHandler):
    """Handler for Qoder command files."""

    @property
    def entity_type(self) -> EntityType:
        return EntityType.COMMAND

    def convert(self, command: ClaudeCommand) -> BundleFile:
        name = normalize_name(command.name)
        logger.debug("Mapped command name: %s -> %s", command.name, name)

        if command.description is not None:
            description = command.description
        else:
            self.warn(f"Synthesized description for command: {command.name}")
            description = f"Converted from Claude command {command.name}"

        header: Dict[str, Any] = {
            'name': name,
            'description': description,
        }
        if command.argument_hint is not None:
            header['argument-hint'] = command.argument_hint
        if command.allowed_tools:
            header['allowed-tools'] = list(command.allowed_tools)

        return BundleFile(name=name, content=self.build_document(header, command.body))
