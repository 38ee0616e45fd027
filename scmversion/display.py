"""
Display modes for non-release branches.

A display mode is either one of the registered named modes or a callable
supplied through the configuration. Both take the same arguments:

    (branch_type, branch_id, base, build, full, config) -> str
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Union

from scmversion.exceptions import InvalidDisplayModeError, InvalidDisplayModeTypeError

DisplayFormatter = Callable[[str, str, str, str, str, Any], str]


class DisplayModeEnum(str, Enum):
    """Registered display modes."""

    full = "full"
    snapshot = "snapshot"
    base = "base"


def _full(branch_type, branch_id, base, build, full, config) -> str:
    return f"{branch_id}-{build}"


def _snapshot(branch_type, branch_id, base, build, full, config) -> str:
    return f"{base}{config.snapshot}"


def _base(branch_type, branch_id, base, build, full, config) -> str:
    return base


DISPLAY_MODES: Mapping[DisplayModeEnum, DisplayFormatter] = MappingProxyType(
    {
        DisplayModeEnum.full: _full,
        DisplayModeEnum.snapshot: _snapshot,
        DisplayModeEnum.base: _base,
    }
)


@dataclass(frozen=True)
class NamedMode:
    """A display mode looked up in the registry."""

    mode: DisplayModeEnum

    @property
    def formatter(self) -> DisplayFormatter:
        return DISPLAY_MODES[self.mode]


@dataclass(frozen=True)
class CustomMode:
    """A display mode supplied as a callable."""

    formatter: DisplayFormatter


DisplayMode = Union[NamedMode, CustomMode]


def resolve_display_mode(display_mode: Any) -> DisplayMode:
    """
    Turn a configured display mode into a NamedMode or a CustomMode.

    Raises:
        InvalidDisplayModeError: If a mode name is not registered
        InvalidDisplayModeTypeError: If the value is neither a name nor a callable
    """
    if isinstance(display_mode, (NamedMode, CustomMode)):
        return display_mode
    if isinstance(display_mode, DisplayModeEnum):
        return NamedMode(display_mode)
    if isinstance(display_mode, str):
        try:
            return NamedMode(DisplayModeEnum(display_mode))
        except ValueError:
            raise InvalidDisplayModeError(
                display_mode, [m.value for m in DisplayModeEnum]
            ) from None
    if callable(display_mode):
        return CustomMode(display_mode)
    raise InvalidDisplayModeTypeError(display_mode)


def format_display(
    display_mode: Any,
    branch_type: str,
    branch_id: str,
    base: str,
    build: str,
    full: str,
    config: Any,
) -> str:
    """Compute the display version of a non-release branch."""
    mode = resolve_display_mode(display_mode)
    return mode.formatter(branch_type, branch_id, base, build, full, config)
