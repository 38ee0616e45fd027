"""Interface implemented by the SCM backends."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from scmversion.model.info import SCMInfo


class SCMInfoService(ABC):
    """
    Reads branch, commit and release tags from a source control backend.

    Implementations return ``SCMInfo.NONE`` when the project directory is not
    under their control. Failures of the underlying tooling are raised.
    """

    #: Delimiter between the branch type and the base in branch names
    branch_type_separator: str = "/"

    @abstractmethod
    def get_info(self, project_dir: Path, config) -> SCMInfo:
        """Current branch, full commit id and abbreviated commit id."""

    @abstractmethod
    def get_base_tags(self, project_dir: Path, config, base: str) -> List[str]:
        """Tags of the ``base`` release line, most recent first."""
