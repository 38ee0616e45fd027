import io
import logging
from types import MappingProxyType
from typing import List, Optional

import pytest

from scmversion.model.info import SCMInfo
from scmversion.scm.base import SCMInfoService


class FakeInfoService(SCMInfoService):
    """In-memory SCM info service recording the calls it receives."""

    def __init__(
        self,
        info: SCMInfo = SCMInfo.NONE,
        tags: Optional[List[str]] = None,
        separator: str = "/",
    ):
        self.info = info
        self.tags = tags or []
        self.branch_type_separator = separator
        self.info_calls = 0
        self.tag_calls: List[str] = []

    def get_info(self, project_dir, config) -> SCMInfo:
        self.info_calls += 1
        return self.info

    def get_base_tags(self, project_dir, config, base) -> List[str]:
        self.tag_calls.append(base)
        return list(self.tags)


@pytest.fixture
def fake_service():
    """Factory building a fake service for a branch."""

    def _make(branch=None, commit="ab12cd3f00d", abbreviated="ab12cd3", **kwargs):
        info = (
            SCMInfo.NONE
            if branch is None
            else SCMInfo(branch=branch, commit=commit, abbreviated=abbreviated)
        )
        return FakeInfoService(info=info, **kwargs)

    return _make


@pytest.fixture
def registry():
    """Wrap a service into a read-only registry under the name 'git'."""

    def _make(service, name="git"):
        return MappingProxyType({name: service})

    return _make


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("scmversion")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream

    logger.removeHandler(handler)
    log_stream.close()
