"""
Qoder agent handler.

Claude agent -> .qoder/agents/<name>.md

Output format:
---
name: security-reviewer
description: Security-focused agent
tools:
- Bash
- Read
---

Agent instructions...

Capability tokens are mapped to Qoder tool names case-insensitively;
unknown tokens are kept exactly as written.
"""

import logging
from typing import Any, Dict, List

from core.bundle_models import BundleFile
from core.naming import normalize_name
from core.plugin_models import ClaudeAgent
from core.target_interface import EntityType
from targets.shared.entity_handler import EntityHandler

logger = logging.getLogger(__name__)

# Qoder tool names, mostly 1:1 with Claude
TOOL_MAP = {
    'bash': 'Bash',
    'read': 'Read',
    'write': 'Write',
    'edit': 'Edit',
    'grep': 'Grep',
    'glob': 'Glob',
    'webfetch': 'WebFetch',
    'websearch': 'WebSearch',
    'patch': 'Patch',
    'task': 'Task',
    'question': 'Question',
    'todowrite': 'TodoWrite',
    'todoread': 'TodoRead',
}


class QoderAgentHandler(EntityHandler):
    """Handler for Qoder agent files."""

    @property
    def entity_type(self) -> EntityType:
        return EntityType.AGENT

    def convert(self, agent: ClaudeAgent) -> BundleFile:
        name = normalize_name(agent.name)
        logger.debug("Mapped agent name: %s -> %s", agent.name, name)

        header: Dict[str, Any] = {
            'name': name,
            'description': self._description(agent),
        }

        if agent.capabilities:
            tools = self.map_tools(agent.capabilities)
            if tools:
                header['tools'] = tools

        return BundleFile(name=name, content=self.build_document(header, agent.body))

    def map_tools(self, capabilities: List[str]) -> List[str]:
        """Translate Claude capability tokens to Qoder tool names."""
        tools = []
        for capability in capabilities:
            mapped = TOOL_MAP.get(capability.lower())
            if mapped:
                tools.append(mapped)
            else:
                self.warn(f"Passed through unmapped tool: {capability}")
                tools.append(capability)
        return tools

    def _description(self, agent: ClaudeAgent) -> str:
        if agent.description is not None:
            return agent.description
        self.warn(f"Synthesized description for agent: {agent.name}")
        return f"Converted from Claude agent {agent.name}"
