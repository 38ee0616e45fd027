"""Writes version information for consumption by other build steps."""

import logging
from pathlib import Path
from typing import Union

from scmversion.model.info import VersionInfo

logger = logging.getLogger(__name__)

DEFAULT_VERSION_FILE = Path("build") / "version.properties"


def format_properties(info: VersionInfo, prefix: str = "VERSION_") -> str:
    """One ``KEY=value`` line per field, e.g. ``VERSION_DISPLAY=2.0.1``."""
    return "".join(
        f"{key}={value}\n" for key, value in info.to_properties(prefix).items()
    )


def format_display_lines(info: VersionInfo) -> str:
    """Human readable listing, one ``[version] name = value`` per field."""
    return "".join(
        f"[version] {key:<11} = {value}\n" for key, value in info.as_dict().items()
    )


def write_version_file(
    info: VersionInfo,
    path: Union[Path, str] = DEFAULT_VERSION_FILE,
    prefix: str = "VERSION_",
) -> Path:
    """
    Write the version properties file, creating parent directories.

    Returns:
        Path of the written file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_properties(info, prefix))
    logger.info(f"Version file written to {path}")
    return path
