"""
Target dialects for converting Claude plugins.

Each target knows how to:
- Convert a ClaudePlugin into a TargetBundle for its tool
- Write that bundle into the tool's config directory layout

Available targets:
- QoderTarget: Qoder (.qoder/agents, .qoder/commands, .qoder/skills)

Adding a new target:
1. Create targets/yourtool/ with an adapter implementing TargetDialect
2. Add one handler per entity type under handlers/
3. Register it in core.pipeline.default_registry
"""

from .qoder import QoderTarget

__all__ = [
    'QoderTarget',
]
