"""
Writes a Qoder bundle to disk.

Layout under the resolved root:
    agents/<name>.md
    commands/<name>.md
    skills/<name>/        # full copy of the skill's source directory

If output_root already ends in '.qoder' it is used as the root directly,
otherwise a '.qoder' directory is nested beneath it. Nothing is created for
empty entity lists.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from core.bundle_models import TargetBundle
from core.errors import BundleWriteError
from core.files import copy_dir, ensure_dir, write_text

logger = logging.getLogger(__name__)

QODER_DIR_NAME = '.qoder'


@dataclass(frozen=True)
class QoderPaths:
    root: Path
    agents_dir: Path
    commands_dir: Path
    skills_dir: Path


def resolve_qoder_paths(output_root: Union[str, Path]) -> QoderPaths:
    """Work out where agents, commands and skills go for output_root."""
    output_root = Path(output_root)
    if output_root.name == QODER_DIR_NAME:
        root = output_root
    else:
        root = output_root / QODER_DIR_NAME
    return QoderPaths(
        root=root,
        agents_dir=root / 'agents',
        commands_dir=root / 'commands',
        skills_dir=root / 'skills',
    )


async def write_qoder_bundle(output_root: Union[str, Path], bundle: TargetBundle) -> None:
    """
    Write bundle under output_root.

    Agents, commands and skills are written in that order, each in bundle
    order. The first failure stops the write; files already written stay.

    Raises:
        BundleWriteError: If creating a directory, writing a file or copying
            a skill fails
    """
    paths = resolve_qoder_paths(output_root)

    if bundle.agents:
        await _ensure_dir(paths.agents_dir)
        for agent in bundle.agents:
            await _write_file(paths.agents_dir / f"{agent.name}.md", agent.content + "\n")

    if bundle.commands:
        await _ensure_dir(paths.commands_dir)
        for command in bundle.commands:
            await _write_file(paths.commands_dir / f"{command.name}.md", command.content + "\n")

    if bundle.skill_dirs:
        await _ensure_dir(paths.skills_dir)
        for skill in bundle.skill_dirs:
            target = paths.skills_dir / skill.name
            try:
                await copy_dir(skill.source_dir, target)
            except OSError as e:
                logger.debug("Failed to copy skill %s from %s: %s", skill.name, skill.source_dir, e)
                raise BundleWriteError(f"Failed to copy skill '{skill.name}': {e}", target) from e
            logger.debug("Copied skill %s -> %s", skill.source_dir, target)

    logger.info(
        "Wrote Qoder bundle to %s (%d agents, %d commands, %d skills)",
        paths.root, len(bundle.agents), len(bundle.commands), len(bundle.skill_dirs),
    )


async def _ensure_dir(path: Path):
    try:
        await ensure_dir(path)
    except OSError as e:
        logger.debug("Failed to create directory %s: %s", path, e)
        raise BundleWriteError(f"Failed to create directory {path}: {e}", path) from e


async def _write_file(path: Path, content: str):
    try:
        await write_text(path, content)
    except OSError as e:
        logger.debug("Failed to write %s: %s", path, e)
        raise BundleWriteError(f"Failed to write {path}: {e}", path) from e
    logger.debug("Wrote %s", path)
