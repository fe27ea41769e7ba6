"""Reading and writing CACHEDIR.TAG files.

See https://bford.info/cachedir/ for the tagging convention.
"""

import logging
from pathlib import Path

from cachedir.types import StrPath, TagState

logger = logging.getLogger(__name__)

TAG_FILENAME = "CACHEDIR.TAG"
HEADER = b"Signature: 8a477f597d28d172789f06886806bc55"


def get_tag_state(directory: StrPath) -> TagState:
    """
    Get the state of the tag in a directory.

    Raises OSError if the directory can't be accessed (missing, permission
    denied etc.) or if the tag file exists but can't be read.
    """
    directory = Path(directory)
    try:
        with open(directory / TAG_FILENAME, "rb") as tag_file:
            header = tag_file.read(len(HEADER))
    except FileNotFoundError:
        # A missing directory is an error, not an untagged directory
        if directory.is_dir():
            return TagState.ABSENT
        raise
    return TagState.PRESENT if header == HEADER else TagState.WRONG_HEADER


def is_tagged(directory: StrPath) -> bool:
    """Return True if the directory holds a tag with the correct header."""
    return get_tag_state(directory) is TagState.PRESENT


def add_tag(directory: StrPath) -> None:
    """
    Add a tag to an existing directory.

    Raises FileExistsError if the directory already contains a tag file,
    regardless of its content. Any other failure to create or write the file
    raises the underlying OSError.
    """
    path = Path(directory) / TAG_FILENAME
    with open(path, "xb") as tag_file:
        tag_file.write(HEADER)
    logger.debug("Created %s", path)


def ensure_tag(directory: StrPath) -> None:
    """
    Make sure a tag file exists in the directory.

    An existing tag file counts as success whatever its content.
    """
    try:
        add_tag(directory)
    except FileExistsError:
        logger.debug("%s already present in %s", TAG_FILENAME, directory)
