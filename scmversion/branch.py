"""Branch name parsing and normalisation."""

import re

from scmversion.model.info import BranchInfo

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9.\-_]")


def parse_branch(branch: str, separator: str = "/") -> BranchInfo:
    """
    Split a branch name into its type and its base.

    The type is the part before the first separator, the base is the rest.
    When the separator is missing (or leads the name), the whole branch name
    is the type and the base is empty.

    * release/2.0 --> (release, 2.0)
    * feature/2.0 --> (feature, 2.0)
    * master --> (master, "")
    """
    pos = branch.find(separator) if separator else -1
    if pos > 0:
        return BranchInfo(type=branch[:pos], base=branch[pos + len(separator) :])
    return BranchInfo(type=branch, base="")


def normalise(value: str) -> str:
    """Replace every character outside ``[A-Za-z0-9.-_]`` with ``-``."""
    return _UNSAFE_CHARS.sub("-", value)
