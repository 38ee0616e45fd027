"""
Versioning engine.

Computes the VersionInfo of a build from the SCM state of its project
directory:

1. Resolve the SCM backend from the registry
2. Read branch and commit (``SCMInfo.NONE`` ends the computation)
3. Split the branch into type and base, normalise it into the branch id
4. Release branches get their display version from the release tags,
   other branches from the display mode
"""

import logging
from pathlib import Path
from typing import Mapping, Optional, Union

from scmversion.branch import normalise
from scmversion.display import format_display
from scmversion.exceptions import UnknownSCMBackendError
from scmversion.model.config import VersioningConfig
from scmversion.model.info import BranchInfo, SCMInfo, VersionInfo
from scmversion.release import compute_release_display
from scmversion.scm import SCM_INFO_SERVICES, SCMInfoService

logger = logging.getLogger(__name__)


def get_scm_info_service(
    scm: str, services: Mapping[str, SCMInfoService] = SCM_INFO_SERVICES
) -> SCMInfoService:
    """
    Get the SCM info service registered under ``scm``.

    Raises:
        UnknownSCMBackendError: If no service is registered under that name
    """
    try:
        return services[scm]
    except KeyError:
        raise UnknownSCMBackendError(scm, services.keys()) from None


def _as_branch_info(parsed) -> BranchInfo:
    if isinstance(parsed, BranchInfo):
        return parsed
    branch_type, base = parsed
    return BranchInfo(type=branch_type, base=base or "")


class VersioningEngine:
    """
    Computes and caches the version information of one build.

    The result of the first computation is kept for the lifetime of the
    engine; ``reset()`` drops it.
    """

    def __init__(
        self,
        project_dir: Union[Path, str] = ".",
        config: Optional[VersioningConfig] = None,
        services: Mapping[str, SCMInfoService] = SCM_INFO_SERVICES,
    ):
        self.project_dir = Path(project_dir)
        self.config = config if config is not None else VersioningConfig()
        self.services = services
        self._info: Optional[VersionInfo] = None

    @property
    def info(self) -> VersionInfo:
        """Computed version information, cached after the first access."""
        if self._info is None:
            self._info = self.compute_info()
        return self._info

    def reset(self) -> None:
        self._info = None

    def compute_info(self) -> VersionInfo:
        config = self.config

        scm_info_service = get_scm_info_service(config.scm, self.services)
        scm_info = scm_info_service.get_info(self.project_dir, config)

        if scm_info == SCMInfo.NONE:
            logger.debug(f"No {config.scm} information found in {self.project_dir}")
            return VersionInfo.NONE

        branch = scm_info.branch
        branch_info = _as_branch_info(
            config.branch_parser(branch, scm_info_service.branch_type_separator)
        )
        branch_id = normalise(branch)
        full = config.full(branch_id, scm_info.abbreviated)

        if branch_info.type in config.releases:
            base_tags = scm_info_service.get_base_tags(
                self.project_dir, config, branch_info.base
            )
            display = compute_release_display(branch_info.base, base_tags)
        else:
            display = format_display(
                config.display_mode,
                branch_info.type,
                branch_id,
                branch_info.base or branch_id,
                scm_info.abbreviated,
                full,
                config,
            )

        logger.debug(
            f"Branch '{branch}' ({branch_info.type}) at {scm_info.abbreviated}: "
            f"display version {display}"
        )
        return VersionInfo(
            scm=config.scm,
            branch=branch,
            branch_type=branch_info.type,
            branch_id=branch_id,
            full=full,
            base=branch_info.base,
            display=display,
            commit=scm_info.commit,
            build=scm_info.abbreviated,
        )
