"""
SCM backends for scmversion.

``SCM_INFO_SERVICES`` is the default, read-only registry handed to the
versioning engine. Callers that need another backend build their own
mapping and pass it to the engine instead of mutating this one.
"""

from types import MappingProxyType
from typing import Mapping

from .base import SCMInfoService
from .git import GitInfoService
from .svn import SVNInfoService

SCM_INFO_SERVICES: Mapping[str, SCMInfoService] = MappingProxyType(
    {
        "git": GitInfoService(),
        "svn": SVNInfoService(),
    }
)

__all__ = [
    "SCMInfoService",
    "GitInfoService",
    "SVNInfoService",
    "SCM_INFO_SERVICES",
]
