"""
Git backend.

Repository access goes through GitPython, imported on first use so that
other backends work on hosts without git. Branch and commit come from HEAD;
release tags are collected by walking the history from HEAD, so the tag of
the closest ancestor comes first.
"""

import logging
import os
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from scmversion.model.info import SCMInfo
from scmversion.release import base_tag_pattern

from .base import SCMInfoService

logger = logging.getLogger(__name__)

ABBREVIATED_LENGTH = 7

_BRANCH_REF_PREFIXES = ("refs/heads/", "refs/remotes/origin/", "origin/")


def branch_from_env(names) -> Optional[str]:
    """
    Get the branch name from the first non-empty environment variable.

    CI servers check out a detached HEAD and expose the branch through
    variables such as ``GIT_BRANCH`` or ``BRANCH_NAME``.
    """
    for name in names:
        value = os.environ.get(name, "").strip()
        if not value:
            continue
        for prefix in _BRANCH_REF_PREFIXES:
            if value.startswith(prefix):
                value = value[len(prefix) :]
                break
        logger.info(f"Using branch '{value}' from environment variable {name}")
        return value
    return None


class GitInfoService(SCMInfoService):
    """SCM info service for git working copies."""

    branch_type_separator = "/"

    def _open(self, project_dir: Path):
        # GitPython checks for the git executable when first imported
        from git import Repo
        from git.exc import InvalidGitRepositoryError, NoSuchPathError

        try:
            return Repo(project_dir, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError):
            logger.debug(f"{project_dir} is not inside a git repository")
            return None

    def get_info(self, project_dir: Path, config) -> SCMInfo:
        repo = self._open(project_dir)
        if repo is None:
            return SCMInfo.NONE

        try:
            head_commit = repo.head.commit
        except ValueError:
            # HEAD points to an unborn branch
            logger.debug(f"No commit found in {repo.working_dir}")
            return SCMInfo.NONE

        if repo.head.is_detached:
            branch = branch_from_env(getattr(config, "branch_env", None) or [])
            if not branch:
                logger.debug(f"Detached HEAD at {head_commit.hexsha}, no branch")
                return SCMInfo.NONE
        else:
            branch = repo.active_branch.name

        return SCMInfo(
            branch=branch,
            commit=head_commit.hexsha,
            abbreviated=head_commit.hexsha[:ABBREVIATED_LENGTH],
        )

    def get_base_tags(self, project_dir: Path, config, base: str) -> List[str]:
        repo = self._open(project_dir)
        if repo is None:
            return []

        pattern = base_tag_pattern(base)
        tags_by_commit: Dict[str, List[Tuple[int, str]]] = defaultdict(list)
        for tag in repo.tags:
            match = pattern.match(tag.name)
            if match:
                tags_by_commit[tag.commit.hexsha].append(
                    (int(match.group(1)), tag.name)
                )
        if not tags_by_commit:
            return []

        base_tags = []
        for commit in repo.iter_commits("HEAD"):
            for _, name in sorted(tags_by_commit.get(commit.hexsha, []), reverse=True):
                base_tags.append(name)
        logger.debug(f"Tags for base {base}: {base_tags}")
        return base_tags
