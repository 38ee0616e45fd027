"""
scmversion: version identifiers derived from source control branches.

The version of a build is computed from the current branch and commit of
its working copy. Release branches (``release/2.0``) get ordinal versions
(``2.0.0``, ``2.0.1``, ...) seeded from existing tags; other branches get a
display version chosen by the configured display mode.

    from scmversion import VersioningEngine, VersioningConfig

    engine = VersioningEngine(".", VersioningConfig(display_mode="snapshot"))
    print(engine.info.display)
"""

__version__ = "0.1.0"

from .branch import normalise, parse_branch
from .display import CustomMode, DisplayModeEnum, NamedMode, resolve_display_mode
from .engine import VersioningEngine, get_scm_info_service
from .exceptions import (
    InvalidDisplayModeError,
    InvalidDisplayModeTypeError,
    MalformedTagError,
    SCMCommandError,
    UnknownSCMBackendError,
    VersioningError,
)
from .model import BranchInfo, SCMInfo, VersionInfo
from .model.config import VersioningConfig
from .release import compute_release_display
from .scm import SCM_INFO_SERVICES, GitInfoService, SCMInfoService, SVNInfoService

__all__ = [
    "__version__",
    # Engine
    "VersioningEngine",
    "VersioningConfig",
    "get_scm_info_service",
    # Records
    "BranchInfo",
    "SCMInfo",
    "VersionInfo",
    # Building blocks
    "parse_branch",
    "normalise",
    "compute_release_display",
    "resolve_display_mode",
    "DisplayModeEnum",
    "NamedMode",
    "CustomMode",
    # Backends
    "SCMInfoService",
    "GitInfoService",
    "SVNInfoService",
    "SCM_INFO_SERVICES",
    # Exceptions
    "VersioningError",
    "UnknownSCMBackendError",
    "InvalidDisplayModeError",
    "InvalidDisplayModeTypeError",
    "MalformedTagError",
    "SCMCommandError",
]
