"""
Unit tests for name normalization and path rewriting.

Tests cover:
- Slug rules (case, separators, namespaces, invalid characters)
- Fallback to 'item' for empty results
- Idempotence
- Rewrite ordering for Claude config paths
"""

import re

import pytest

from core.naming import (
    FALLBACK_NAME,
    PathRewrite,
    claude_path_rewrites,
    normalize_name,
    rewrite_paths,
)

SLUG_RE = re.compile(r'^[a-z0-9_-]+$')


class TestNormalizeName:
    """Tests for normalize_name."""

    @pytest.mark.parametrize('value, expected', [
        ('My Agent Name', 'my-agent-name'),
        ('workflows:plan', 'workflows-plan'),
        ('Security Reviewer', 'security-reviewer'),
        ('group/sub\\item', 'group-sub-item'),
        ('  padded  ', 'padded'),
        ('a :: b', 'a-b'),
        ('keep_underscores', 'keep_underscores'),
        ('Weird!@#Chars', 'weird-chars'),
        ('--leading-and-trailing--', 'leading-and-trailing'),
        ('tabs\tand\nnewlines', 'tabs-and-newlines'),
        ('café', 'caf'),
    ])
    def test_normalizes(self, value, expected):
        """Test the slug rules on representative names."""
        assert normalize_name(value) == expected

    @pytest.mark.parametrize('value', ['', '   ', '---', '!!!', ':/:', None])
    def test_fallback(self, value):
        """Test names that normalize to nothing fall back to 'item'."""
        assert normalize_name(value) == FALLBACK_NAME

    @pytest.mark.parametrize('value', [
        'My Agent Name', 'workflows:plan', '  x  ', '', '日本語', 'A/B:C D', '-_-',
    ])
    def test_idempotent_and_valid(self, value):
        """Test normalizing twice changes nothing and output is a valid slug."""
        once = normalize_name(value)
        assert normalize_name(once) == once
        assert SLUG_RE.match(once)
        assert not once.startswith('-')
        assert not once.endswith('-')


class TestPathRewrites:
    """Tests for rewrite_paths with Claude -> target rules."""

    @pytest.fixture
    def rules(self):
        return claude_path_rewrites('.qoder')

    def test_home_relative(self, rules):
        """Test ~/.claude/ is rewritten without doubling the target dir."""
        result = rewrite_paths("Use ~/.claude/settings.json for configuration", rules)
        assert result == "Use ~/.qoder/settings.json for configuration"
        assert '.qoder/.qoder/' not in result

    def test_bare_relative(self, rules):
        """Test project-relative .claude/ paths."""
        result = rewrite_paths("See .claude/agents/foo.md", rules)
        assert result == "See .qoder/agents/foo.md"

    def test_mixed(self, rules):
        """Test both forms in one body."""
        body = "~/.claude/a and .claude/b and ~/.claude/c"
        assert rewrite_paths(body, rules) == "~/.qoder/a and .qoder/b and ~/.qoder/c"

    def test_untouched(self, rules):
        """Test text without Claude paths is unchanged."""
        body = "claude is mentioned but .claudex and ~/.config/ are not paths to rewrite"
        assert rewrite_paths(body, rules) == body

    def test_rules_are_ordered(self):
        """Test rules apply in list order."""
        rules = [PathRewrite('a', 'b'), PathRewrite('b', 'c')]
        assert rewrite_paths('a', rules) == 'c'
        assert rewrite_paths('a', list(reversed(rules))) == 'b'
