"""cachedir - Create and detect CACHEDIR.TAG cache directory tags."""

from cachedir.atomic import mkdir_atomic
from cachedir.tag import (
    HEADER,
    TAG_FILENAME,
    add_tag,
    ensure_tag,
    get_tag_state,
    is_tagged,
)
from cachedir.types import StrPath, TagState

__version__ = "0.3.0"

__all__ = [
    "HEADER",
    "TAG_FILENAME",
    "StrPath",
    "TagState",
    "add_tag",
    "ensure_tag",
    "get_tag_state",
    "is_tagged",
    "mkdir_atomic",
]
