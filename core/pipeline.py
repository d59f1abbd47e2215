"""
Convert-then-write entry point.

    bundle = await convert_plugin(plugin, 'qoder', Path('~/project'))
    bundle = await convert_plugin(plugin, None, Path('~/project/.qoder'))

Passing None as the target name picks the target whose config directory
output_root already points at. Each call builds its bundle from scratch, so
conversions for different targets or output roots can run concurrently.
Concurrent writes to the same output root are not coordinated.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from core.bundle_models import TargetBundle
from core.errors import UnknownTargetError
from core.options import ConversionOptions
from core.plugin_models import ClaudePlugin
from core.registry import TargetRegistry

logger = logging.getLogger(__name__)


def default_registry() -> TargetRegistry:
    """Registry with every built-in target."""
    from targets import QoderTarget

    registry = TargetRegistry()
    registry.register(QoderTarget())
    return registry


async def convert_plugin(plugin: ClaudePlugin, target_name: Optional[str],
                         output_root: Union[str, Path],
                         options: Union[ConversionOptions, Mapping[str, Any], None] = None,
                         registry: Optional[TargetRegistry] = None) -> TargetBundle:
    """
    Convert plugin for target_name and write it under output_root.

    Args:
        plugin: Loaded Claude plugin
        target_name: Registered target name, e.g. 'qoder', or None to detect
            the target from output_root
        output_root: Project directory or the target's config directory
        options: ConversionOptions or a plain mapping of options
        registry: Registry to look the target up in (defaults to built-ins)

    Returns:
        The bundle that was written

    Raises:
        UnknownTargetError: If target_name is not registered, or no target
            matches output_root when detecting
        BundleWriteError: If writing the bundle fails
    """
    registry = registry or default_registry()
    if target_name is None:
        target = registry.detect_target(Path(output_root))
        if target is None:
            raise UnknownTargetError(Path(output_root).name)
        logger.debug("Detected target %s from %s", target.target_name, output_root)
    else:
        target = registry.require_target(target_name)

    if not isinstance(options, ConversionOptions):
        options = ConversionOptions.from_dict(options)

    bundle = target.convert(plugin, options)
    for warning in target.get_conversion_warnings():
        logger.warning("%s: %s", target.target_name, warning)

    await target.write(output_root, bundle)
    return bundle
