"""Data model for scmversion.

The configuration model lives in ``scmversion.model.config``; it depends on
the default branch parser and is not re-exported here.
"""

from .info import BranchInfo, SCMInfo, VersionInfo

__all__ = [
    "BranchInfo",
    "SCMInfo",
    "VersionInfo",
]
