"""
Immutable records produced while computing a version.

SCMInfo and VersionInfo carry a ``NONE`` sentinel for the case where no
SCM context could be found. Callers compare against the sentinel instead of
checking for ``None``.
"""

from dataclasses import asdict, dataclass, fields
from typing import ClassVar, Dict


@dataclass(frozen=True)
class SCMInfo:
    """Branch and commit of the working copy, as reported by a backend."""

    branch: str = ""
    commit: str = ""
    abbreviated: str = ""

    NONE: ClassVar["SCMInfo"]


SCMInfo.NONE = SCMInfo()


@dataclass(frozen=True)
class BranchInfo:
    """A branch name split into its type and its base."""

    type: str
    base: str = ""


@dataclass(frozen=True)
class VersionInfo:
    """
    Computed version information for a build.

    Attributes:
        scm: Name of the SCM backend used
        branch: Raw branch name
        branch_type: Leading segment of the branch name (e.g. ``release``)
        branch_id: Branch name with unsafe characters replaced by ``-``
        full: Combination of branch_id and build
        base: Remainder of the branch name after the type segment
        display: Human-facing version
        commit: Full commit identifier
        build: Abbreviated commit identifier
    """

    scm: str = ""
    branch: str = ""
    branch_type: str = ""
    branch_id: str = ""
    full: str = ""
    base: str = ""
    display: str = ""
    commit: str = ""
    build: str = ""

    NONE: ClassVar["VersionInfo"]

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)

    def to_properties(self, prefix: str = "VERSION_") -> Dict[str, str]:
        """Flat ``PREFIX + FIELD`` mapping, e.g. ``VERSION_BRANCHID``."""
        return {
            f"{prefix}{f.name.replace('_', '').upper()}": getattr(self, f.name)
            for f in sorted(fields(self), key=lambda f: f.name)
        }


VersionInfo.NONE = VersionInfo()
