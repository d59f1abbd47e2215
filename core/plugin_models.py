"""
In-memory representation of a Claude Code plugin.

A plugin directory looks like:
    .claude-plugin/plugin.json   # manifest
    agents/*.md                  # agent definitions (YAML frontmatter + body)
    commands/**/*.md             # slash commands, nested dirs become "group:item"
    skills/<name>/SKILL.md       # skill directories with supporting files

These models are filled in by whatever loads the plugin from disk and are
read-only input to the target converters. Fields such as model, hooks and
mcp_servers are carried so that richer targets can use them; the Qoder
target ignores them.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class PluginManifest:
    """Contents of .claude-plugin/plugin.json that converters care about."""
    name: str
    version: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class ClaudeAgent:
    """
    A Claude agent definition.

    capabilities holds the raw tool tokens from the agent's frontmatter
    (e.g. ["bash", "read"]); their casing is whatever the author wrote.
    """
    name: str
    body: str
    source_path: Path
    description: Optional[str] = None
    capabilities: Optional[List[str]] = None
    model: Optional[str] = None


@dataclass(frozen=True)
class ClaudeCommand:
    """A Claude slash command. name may be namespaced, e.g. 'workflows:plan'."""
    name: str
    body: str
    source_path: Path
    description: Optional[str] = None
    argument_hint: Optional[str] = None
    allowed_tools: Optional[List[str]] = None
    model: Optional[str] = None


@dataclass(frozen=True)
class ClaudeSkill:
    """A skill directory. source_dir must exist when the bundle is written."""
    name: str
    source_dir: Path
    skill_path: Path
    description: Optional[str] = None


@dataclass(frozen=True)
class ClaudePlugin:
    """A complete Claude plugin as handed to a target converter."""
    root: Path
    manifest: PluginManifest
    agents: List[ClaudeAgent] = field(default_factory=list)
    commands: List[ClaudeCommand] = field(default_factory=list)
    skills: List[ClaudeSkill] = field(default_factory=list)
    hooks: Optional[Dict[str, Any]] = None
    mcp_servers: Optional[Dict[str, Any]] = None
