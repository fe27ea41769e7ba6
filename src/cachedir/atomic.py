"""Atomic creation of tagged cache directories."""

import logging
import os
import shutil
import uuid
from pathlib import Path

from cachedir.tag import add_tag
from cachedir.types import StrPath

logger = logging.getLogger(__name__)


def mkdir_atomic(directory: StrPath) -> bool:
    """
    Create a directory with a CACHEDIR.TAG file in it as a single operation.

    Returns True if this call created the directory, False if something
    already existed at the path (the existing entry is not inspected or
    changed, so its tag is not verified either).

    The directory is built under a temporary name next to its final location,
    tagged, and then renamed into place. Creating it under the final name and
    tagging it afterwards could leave an untagged directory behind if the
    process were interrupted in between, and such a directory would never be
    tagged later since existing directories are left alone.

    Raises OSError if the parent directory is missing or unwritable, or if
    the rename fails for a reason other than losing a race to another creator.
    """
    path = Path(directory)
    if os.path.lexists(path):
        return False

    if not path.is_absolute():
        path = Path.cwd() / path

    # os.mkdir rather than mkdtemp so the published directory gets the umask mode
    staging = path.parent / f".{path.name}.{uuid.uuid4().hex[:12]}"
    os.mkdir(staging)
    try:
        add_tag(staging)
        try:
            os.rename(staging, path)
        except OSError:
            if not path.is_dir():
                raise
            logger.debug("Lost the race to create %s", path)
            return False
        logger.debug("Created tagged directory %s", path)
        return True
    finally:
        # Gone after a successful rename
        if os.path.lexists(staging):
            shutil.rmtree(staging)
