"""
Subversion backend.

Calls the ``svn`` command line client with ``--xml`` output. Branch names
follow the standard layout: ``trunk`` or a single path segment below
``branches/``, with ``-`` between the branch type and the base
(``branches/release-2.0``).
"""

import logging
import re
import subprocess
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Tuple

from scmversion.exceptions import SCMCommandError
from scmversion.model.info import SCMInfo
from scmversion.release import base_tag_pattern

from .base import SCMInfoService

logger = logging.getLogger(__name__)

_NOT_A_WORKING_COPY = "155007"
_PATH_NOT_FOUND = ("160013", "170000")

# The first trunk or branches segment of the path wins
_LAYOUT_RE = re.compile(
    r"^(?P<prefix>.*?)/(?:(?P<trunk>trunk)(?:/|$)|branches/(?P<name>[^/]+))"
)


def run_svn(args: List[str], cwd: Path) -> subprocess.CompletedProcess:
    command = ["svn", "--non-interactive", *args]
    logger.debug(f"Running {' '.join(command)} in {cwd}")
    try:
        return subprocess.run(
            command,
            cwd=cwd,
            text=True,
            capture_output=True,
            check=False,
        )
    except FileNotFoundError as e:
        raise SCMCommandError(command, stderr=str(e)) from e


def parse_relative_path(relative_url: str) -> Tuple[Optional[str], str]:
    """
    Get the branch name and the project prefix from a repository path.

    Returns:
        ``(branch, prefix)``; branch is None for paths outside trunk/branches
    """
    path = relative_url.lstrip("^")
    match = _LAYOUT_RE.match(path)
    if match is None:
        return None, ""
    return match.group("trunk") or match.group("name"), match.group("prefix")


class SVNInfoService(SCMInfoService):
    """SCM info service for Subversion working copies."""

    branch_type_separator = "-"

    def _info(self, project_dir: Path) -> Optional[ET.Element]:
        result = run_svn(["info", "--xml"], project_dir)
        if result.returncode != 0:
            if _NOT_A_WORKING_COPY in result.stderr:
                logger.debug(f"{project_dir} is not a Subversion working copy")
                return None
            raise SCMCommandError(
                ["svn", "info", "--xml"], result.returncode, result.stderr
            )
        entry = ET.fromstring(result.stdout).find("entry")
        if entry is None:
            raise SCMCommandError(["svn", "info", "--xml"], stderr="no entry in output")
        return entry

    @staticmethod
    def _relative_url(entry: ET.Element) -> str:
        relative_url = entry.findtext("relative-url")
        if relative_url:
            return relative_url
        url = entry.findtext("url", "")
        root = entry.findtext("repository/root", "")
        return "^" + url[len(root) :]

    def get_info(self, project_dir: Path, config) -> SCMInfo:
        entry = self._info(project_dir)
        if entry is None:
            return SCMInfo.NONE

        branch, _ = parse_relative_path(self._relative_url(entry))
        if branch is None:
            logger.debug(f"Cannot infer a branch from {entry.findtext('url')}")
            return SCMInfo.NONE

        revision = entry.get("revision")
        if not revision:
            return SCMInfo.NONE
        return SCMInfo(branch=branch, commit=revision, abbreviated=revision)

    def get_base_tags(self, project_dir: Path, config, base: str) -> List[str]:
        entry = self._info(project_dir)
        if entry is None:
            return []

        _, prefix = parse_relative_path(self._relative_url(entry))
        root = entry.findtext("repository/root", "").rstrip("/")
        tags_url = f"{root}{prefix}/tags"

        result = run_svn(["list", "--xml", tags_url], project_dir)
        if result.returncode != 0:
            if any(code in result.stderr for code in _PATH_NOT_FOUND):
                logger.debug(f"No tags directory at {tags_url}")
                return []
            raise SCMCommandError(
                ["svn", "list", "--xml", tags_url], result.returncode, result.stderr
            )

        pattern = base_tag_pattern(base)
        candidates = []
        for tag in ET.fromstring(result.stdout).iter("entry"):
            name = tag.findtext("name", "")
            match = pattern.match(name)
            if not match:
                continue
            commit = tag.find("commit")
            revision = int(commit.get("revision", "0")) if commit is not None else 0
            candidates.append((revision, int(match.group(1)), name))

        base_tags = [name for _, _, name in sorted(candidates, reverse=True)]
        logger.debug(f"Tags for base {base}: {base_tags}")
        return base_tags
