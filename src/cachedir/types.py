"""Core types for the cachedir library."""

import os
from enum import Enum

# Anything the os/pathlib functions accept as a filesystem path
StrPath = str | os.PathLike[str]


class TagState(Enum):
    """State of the CACHEDIR.TAG file in a directory."""

    ABSENT = "absent"  # No tag file
    WRONG_HEADER = "wrong_header"  # Tag file without the required header
    PRESENT = "present"  # Tag file with the correct header
