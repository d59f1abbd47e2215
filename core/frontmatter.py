"""
YAML frontmatter formatting and parsing.

Agent and command files are Markdown documents with a YAML header:

---
name: agent-name
description: Agent description
tools:
- Read
- Grep
---

Agent instructions in markdown...

format_frontmatter and parse_frontmatter are inverses for headers holding
scalars and lists of strings, as long as the body does not itself start
with a '---' line.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

import yaml

from core.errors import FrontmatterError

_FRONTMATTER_RE = re.compile(r'\A---\n(.*?)^---[ \t]*(?:\n|\Z)(.*)\Z', re.DOTALL | re.MULTILINE)


@dataclass
class FrontmatterDocument:
    """A parsed document: YAML header mapping plus Markdown body."""
    data: Dict[str, Any] = field(default_factory=dict)
    body: str = ''


def format_frontmatter(data: Mapping[str, Any], body: str) -> str:
    """
    Serialize a header mapping and body into a single document.

    Keys keep their insertion order. An empty header produces just the body.
    """
    if not data:
        return body

    yaml_output = yaml.safe_dump(
        dict(data),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
    return f"---\n{yaml_output}---\n\n{body}"


def parse_frontmatter(content: str) -> FrontmatterDocument:
    """
    Split a document into its YAML header and body.

    Documents without a header are returned with empty data and the full
    content as body.

    Raises:
        FrontmatterError: If the header is not valid YAML or not a mapping
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return FrontmatterDocument(data={}, body=content)

    yaml_content, body = match.groups()
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Failed to parse YAML frontmatter: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontmatterError("YAML frontmatter must be a mapping")

    # format_frontmatter separates header and body with a blank line
    if body.startswith('\n'):
        body = body[1:]

    return FrontmatterDocument(data=data, body=body)
