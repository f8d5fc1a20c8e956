"""Channel URL shape detection."""

import re
from urllib.parse import urlparse

from idea_engine.domain.enums import ReferenceKind
from idea_engine.domain.errors import ResolutionError
from idea_engine.domain.models import ChannelReference

# Checked in this order; the first match wins.
REFERENCE_PATTERNS: tuple[tuple[ReferenceKind, re.Pattern[str]], ...] = (
    (ReferenceKind.HANDLE, re.compile(r"/@([\w.-]+)")),
    (ReferenceKind.CHANNEL_ID, re.compile(r"/channel/([\w-]+)")),
    (ReferenceKind.CUSTOM, re.compile(r"/c/([\w.-]+)")),
    (ReferenceKind.USERNAME, re.compile(r"/user/([\w.-]+)")),
)

YOUTUBE_HOSTS = ("youtube.com", "youtu.be")


def is_youtube_host(url: str) -> bool:
    """Check whether a URL points at a YouTube host."""
    hostname = urlparse(url).hostname or ""
    return any(host in hostname for host in YOUTUBE_HOSTS)


def match_reference(url: str) -> ChannelReference | None:
    """Return the first recognized channel shape in the URL path, if any."""
    path = urlparse(url).path
    for kind, pattern in REFERENCE_PATTERNS:
        match = pattern.search(path)
        if match:
            return ChannelReference(kind=kind, value=match.group(1), url=url)
    return None


def parse_channel_reference(url: str) -> ChannelReference:
    """Parse a channel URL into a ChannelReference.

    Raises:
        ResolutionError: If the URL matches none of the recognized shapes
    """
    reference = match_reference(url)
    if reference is None:
        raise ResolutionError("Invalid YouTube channel URL")
    return reference
