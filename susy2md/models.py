from dataclasses import dataclass
from typing import Optional

from .errors import InvalidNameError

UNSAFE_NAME_CHARS = ("/", "\\", "\x00")


def ensure_safe_name(name, what="name"):
    """Reject names that cannot be written as a single file in the save directory"""
    if not name or name in (".", ".."):
        raise InvalidNameError(f"Invalid {what}: {name!r} | Must be a non-empty file name", stage="extract")
    for char in UNSAFE_NAME_CHARS:
        if char in name:
            raise InvalidNameError(f"Invalid {what}: {name!r} | Contains path separator {char!r}", stage="extract")
    return name


@dataclass
class SubpageDescriptor:
    """One assignment page: where to fetch it and which local file receives the Markdown"""

    remote_url: str
    output_title: str
    html_body: Optional[str] = None

    def __post_init__(self):
        ensure_safe_name(self.output_title, "output title")


@dataclass
class ImageDescriptor:
    remote_url: str
    local_name: str

    def __post_init__(self):
        ensure_safe_name(self.local_name, "image file name")
