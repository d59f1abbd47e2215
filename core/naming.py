"""
Name normalization and path rewriting shared by all document converters.

normalize_name turns arbitrary entity names ("My Agent", "workflows:plan")
into slugs safe to use as file names. rewrite_paths applies an ordered list
of literal rewrites to a document body; targets build that list with
claude_path_rewrites.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

FALLBACK_NAME = 'item'


def normalize_name(value: Optional[str]) -> str:
    """
    Normalize an entity name to a lowercase slug of [a-z0-9_-].

    Idempotent, and never returns an empty string.
    """
    trimmed = (value or '').strip()
    if not trimmed:
        return FALLBACK_NAME

    normalized = trimmed.lower()
    normalized = re.sub(r'[\\/]+', '-', normalized)
    normalized = re.sub(r'[:\s]+', '-', normalized)
    normalized = re.sub(r'[^a-z0-9_-]+', '-', normalized)
    normalized = re.sub(r'-+', '-', normalized)
    normalized = normalized.strip('-')
    return normalized or FALLBACK_NAME


@dataclass(frozen=True)
class PathRewrite:
    """A literal substring rewrite applied to document bodies."""
    pattern: str
    replacement: str

    def apply(self, text: str) -> str:
        return text.replace(self.pattern, self.replacement)


def claude_path_rewrites(target_dir_name: str) -> List[PathRewrite]:
    """
    Rewrites from Claude's config directory to a target's.

    The home-relative rule comes first: '~/.claude/' contains '.claude/',
    and once rewritten it no longer matches the bare rule.

    Args:
        target_dir_name: Target config directory, e.g. '.qoder'
    """
    return [
        PathRewrite('~/.claude/', f'~/{target_dir_name}/'),
        PathRewrite('.claude/', f'{target_dir_name}/'),
    ]


def rewrite_paths(body: str, rules: Iterable[PathRewrite]) -> str:
    """Apply rewrite rules to body in order."""
    for rule in rules:
        body = rule.apply(body)
    return body
