"""Shared fixtures."""

from pathlib import Path

import pytest

from core.plugin_models import (
    ClaudeAgent,
    ClaudeCommand,
    ClaudePlugin,
    ClaudeSkill,
    PluginManifest,
)

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


@pytest.fixture
def sample_skill_dir():
    """Skill directory with a SKILL.md and a nested script."""
    return FIXTURES_DIR / 'sample-plugin' / 'skills' / 'skill-one'


@pytest.fixture
def fixture_plugin():
    """Plugin with one agent, one namespaced command and one skill."""
    return ClaudePlugin(
        root=Path('/tmp/plugin'),
        manifest=PluginManifest(name='fixture', version='1.0.0'),
        agents=[
            ClaudeAgent(
                name='Security Reviewer',
                description='Security-focused agent',
                capabilities=['bash', 'read', 'grep'],
                model='claude-sonnet-4-20250514',
                body='Focus on vulnerabilities.',
                source_path=Path('/tmp/plugin/agents/security-reviewer.md'),
            ),
        ],
        commands=[
            ClaudeCommand(
                name='workflows:plan',
                description='Planning command',
                argument_hint='[FOCUS]',
                model='inherit',
                allowed_tools=['Read'],
                body='Plan the work.',
                source_path=Path('/tmp/plugin/commands/workflows/plan.md'),
            ),
        ],
        skills=[
            ClaudeSkill(
                name='existing-skill',
                description='Existing skill',
                source_dir=Path('/tmp/plugin/skills/existing-skill'),
                skill_path=Path('/tmp/plugin/skills/existing-skill/SKILL.md'),
            ),
        ],
        mcp_servers={'local': {'command': 'echo', 'args': ['hello']}},
    )
