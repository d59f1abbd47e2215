"""
Conversion options shared by all target dialects.

Each target reads only the options it understands. Values for
agent_mode and permissions outside the known sets are kept, and keys that
are not recognized are kept in `extras` so that a caller can pass one options
mapping to several targets without any of them failing.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

AGENT_MODES = ('primary', 'subagent')
PERMISSION_MODES = ('none', 'broad', 'from-commands')
_TRUE_STRINGS = ('true', 'yes', 'on', '1')
_FALSE_STRINGS = ('false', 'no', 'off', '0')

# Accept the camelCase spelling used by the JS plugin tooling
_KEY_ALIASES = {
    'agentMode': 'agent_mode',
    'inferTemperature': 'infer_temperature',
}


@dataclass(frozen=True)
class ConversionOptions:
    """
    Options controlling how a plugin is converted.

    Attributes:
        agent_mode: Frame agents as standalone ('primary') or sub-agents
        infer_temperature: Derive a temperature hint from agent descriptions
        permissions: Coarse permission policy for targets that have one
        extras: Options not recognized by this record, passed through untouched
    """
    agent_mode: str = 'subagent'
    infer_temperature: bool = True
    permissions: str = 'broad'
    extras: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Unknown modes are kept, not rejected
        if self.agent_mode not in AGENT_MODES:
            logger.debug("Unrecognized agent_mode kept as-is: %r", self.agent_mode)
        if self.permissions not in PERMISSION_MODES:
            logger.debug("Unrecognized permissions kept as-is: %r", self.permissions)

    @classmethod
    def from_dict(cls, values: Optional[Mapping[str, Any]] = None) -> 'ConversionOptions':
        """
        Build options from a plain mapping.

        Args:
            values: Option mapping, snake_case or camelCase keys. None means defaults.

        Returns:
            ConversionOptions with unknown keys collected in extras

        Raises:
            ValueError: If infer_temperature is not a boolean or boolean string
        """
        if not values:
            return cls()

        known = {}
        extras = {}
        for key, value in values.items():
            key = _KEY_ALIASES.get(key, key)
            if key in ('agent_mode', 'infer_temperature', 'permissions'):
                known[key] = value
            else:
                extras[key] = value

        if 'infer_temperature' in known:
            known['infer_temperature'] = _parse_bool('infer_temperature', known['infer_temperature'])

        return cls(extras=extras, **known)


def _parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f"Invalid {key}: {value!r} (expected true or false)")
