"""Configuration files for scmversion.

Options are read from the ``[versioning]`` section of ``scmversion.cfg`` in
the project directory, or from the user configuration file when the project
has none. Explicit overrides (e.g. command line options) win over both.
"""

import configparser
import logging
import os
import platform
from pathlib import Path
from typing import Any, Dict, Optional, Union

from scmversion.model.config import VersioningConfig

logger = logging.getLogger(__name__)

APP_NAME = "scmversion"
SECTION = "versioning"
FILE_OPTIONS = ("scm", "releases", "display_mode", "snapshot", "branch_env", "prefix")

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")

if platform.system() == "Darwin":
    # macOS
    config_dir = Path("~/Library/Application Support/scmversion").expanduser()
else:
    # Linux or others
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))


def get_config_file() -> Path:
    return config_dir / f"{APP_NAME}.cfg"


def get_project_config_file(project_dir: Union[Path, str]) -> Path:
    return Path(project_dir) / f"{APP_NAME}.cfg"


class ConfigAccessor:
    """
    A dict-like accessor for configuration files.

    Missing files, sections and keys are handled gracefully.

    Usage:
        config = ConfigAccessor()
        value = config.get('versioning', 'scm', default='git')
    """

    def __init__(self, config_path: Optional[Path] = None):
        if config_path is None:
            self.config_path = get_config_file()
        else:
            self.config_path = Path(config_path)

        self.config = configparser.ConfigParser()
        if self.config_path.exists():
            logger.debug(f"Reading configuration from {self.config_path}")
            self.config.read(self.config_path)

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from the specified section and key.

        Returns:
            The configuration value if it exists, otherwise the default value
        """
        try:
            return self.config[section][key]
        except (KeyError, configparser.NoSectionError, configparser.NoOptionError):
            return default

    def options(self, section: str) -> list:
        try:
            return self.config.options(section)
        except configparser.NoSectionError:
            return []


def find_config_accessor(project_dir: Union[Path, str]) -> ConfigAccessor:
    """Project configuration if present, user configuration otherwise."""
    project_config = get_project_config_file(project_dir)
    if project_config.exists():
        return ConfigAccessor(project_config)
    return ConfigAccessor()


def load_config(project_dir: Union[Path, str] = ".", **overrides) -> VersioningConfig:
    """
    Build the versioning configuration of a project.

    Args:
        project_dir: Directory of the project being built
        **overrides: Options taking precedence over the configuration files.
            None values are ignored.

    Returns:
        The merged VersioningConfig

    Raises:
        pydantic.ValidationError: If an option has an invalid value
    """
    accessor = find_config_accessor(project_dir)
    unknown = sorted(set(accessor.options(SECTION)) - set(FILE_OPTIONS))
    if unknown:
        logger.warning(
            f"Ignoring unknown options in {accessor.config_path}: {', '.join(unknown)}"
        )
    values: Dict[str, Any] = {}
    for option in FILE_OPTIONS:
        value = accessor.get(SECTION, option)
        if value is not None:
            values[option] = value
    values.update({k: v for k, v in overrides.items() if v is not None})
    return VersioningConfig(**values)
