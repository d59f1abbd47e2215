"""
Async filesystem helpers used by target writers.

File contents go through aiofiles; directory operations have no async
equivalent there, so they run in a worker thread.
"""

import asyncio
import shutil
from pathlib import Path
from typing import Union

import aiofiles

PathLike = Union[str, Path]


async def ensure_dir(path: PathLike) -> None:
    """Create path and any missing parents. No error if it already exists."""
    await asyncio.to_thread(Path(path).mkdir, parents=True, exist_ok=True)


async def write_text(path: PathLike, content: str) -> None:
    """Create or overwrite a UTF-8 text file."""
    async with aiofiles.open(path, 'w', encoding='utf-8', newline='') as f:
        await f.write(content)


async def copy_dir(src: PathLike, dst: PathLike) -> None:
    """
    Recursively copy the src tree into dst.

    dst may already exist; files present in both are overwritten.

    Raises:
        FileNotFoundError: If src does not exist
        NotADirectoryError: If src is not a directory
    """
    await asyncio.to_thread(shutil.copytree, Path(src), Path(dst), dirs_exist_ok=True)
