"""Next release number computed from existing release tags."""

import re
from typing import Sequence

from scmversion.exceptions import MalformedTagError


def base_tag_pattern(base: str) -> "re.Pattern[str]":
    """Pattern of the release tags of a release line, e.g. ``2.0.3`` for ``2.0``."""
    return re.compile(rf"^{re.escape(base)}\.(\d+)$")


def compute_release_display(base: str, tags: Sequence[str]) -> str:
    """
    Compute the display version of a release branch.

    The first tag is the most recent one; its numeric suffix is incremented.
    Without any tag, numbering starts at 0.

    Args:
        base: Release line, e.g. ``2.0``
        tags: Existing release tags, most recent first

    Returns:
        ``<base>.<N>``

    Raises:
        MalformedTagError: If the most recent tag has no numeric suffix
    """
    if not tags:
        return f"{base}.0"

    last_tag = tags[0].strip()
    match = re.search(rf"{re.escape(base)}\.(\d+)", last_tag)
    if match is None:
        raise MalformedTagError(last_tag, base)
    return f"{base}.{int(match.group(1)) + 1}"
