"""Pydantic model for the versioning configuration."""

from typing import Any, Callable, List, Set, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from scmversion.branch import parse_branch
from scmversion.model.info import BranchInfo


def default_full(branch_id: str, abbreviated: str) -> str:
    """Default full version: ``<branch_id>-<abbreviated>``."""
    return f"{branch_id}-{abbreviated}"


def _split_list(v: Any) -> Any:
    if isinstance(v, str):
        return [item.strip() for item in v.split(",") if item.strip()]
    return v


class VersioningConfig(BaseModel):
    """
    Options consumed by the versioning engine.

    ``display_mode`` accepts any value. A registered mode name or a callable
    is valid; anything else is reported when the display version is computed.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    scm: str = Field("git", description="SCM backend name")
    branch_parser: Callable[[str, str], Union[BranchInfo, tuple]] = Field(
        parse_branch, description="Splits a branch name into type and base"
    )
    full: Callable[[str, str], str] = Field(
        default_full, description="Builds the full version"
    )
    releases: Set[str] = Field(
        default_factory=lambda: {"release"},
        description="Branch types treated as release lines",
    )
    display_mode: Any = Field("full", description="Display mode name or callable")
    snapshot: str = Field("-SNAPSHOT", description="Suffix of the snapshot mode")
    branch_env: List[str] = Field(
        default_factory=list,
        description="Environment variables holding the branch on a detached HEAD",
    )
    prefix: str = Field("VERSION_", description="Key prefix of the version file")

    @field_validator("scm")
    @classmethod
    def validate_scm(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must be a non-empty string")
        return v.strip()

    @field_validator("releases", "branch_env", mode="before")
    @classmethod
    def split_comma_separated(cls, v: Any) -> Any:
        return _split_list(v)
