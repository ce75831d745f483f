"""Configuration management for yawst.

Options are stored as ``KEY=value`` lines in ``~/.yawstrc``. The file is
created with documented defaults on first run and read on every start.
Set ``YAWST_CONFIG`` to use a different file.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from pydantic import BaseModel, Field, ValidationError, field_validator

from yawst.errors import ConfigError

CONFIG_PATH_ENV = "YAWST_CONFIG"
CONFIG_FILE_NAME = ".yawstrc"


def _default_file_input() -> str:
    return str(Path.home()) + os.sep


class ScraperConfig(BaseModel):
    """Options read from the configuration file.

    Field aliases are the keys used in the file.
    """

    file_input_default: str = Field(
        default_factory=_default_file_input, alias="FILE_INPUT_DEFAULT"
    )
    table_separator: str = Field(default=";", alias="TABLE_SEPARATOR", min_length=1)
    omit_table_headers: bool = Field(default=False, alias="OMIT_TABLE_HEADERS")
    autoclose: bool = Field(default=True, alias="AUTOCLOSE")
    whole_elements: bool = Field(default=False, alias="WHOLE_ELEMENTS")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    @field_validator("file_input_default")
    @classmethod
    def expand_home(cls, v: str) -> str:
        """Expand a leading ``~`` so the path prompt starts in the right place."""
        return os.path.expanduser(v) if v else _default_file_input()


# (key, description) in the order they are written to a new config file
CONFIG_OPTIONS: list[tuple[str, str]] = [
    ("FILE_INPUT_DEFAULT", "Directory pre-filled in the output file prompt"),
    ("TABLE_SEPARATOR", "Text placed between table cells"),
    ("OMIT_TABLE_HEADERS", "Leave the header row out of table output"),
    ("AUTOCLOSE", "Exit after one scrape instead of returning to the menu"),
    ("WHOLE_ELEMENTS", "Write whole matched elements instead of their text"),
]


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path from ``YAWST_CONFIG`` if set, otherwise ``~/.yawstrc``.
    """
    override = os.environ.get(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / CONFIG_FILE_NAME


def default_config_values() -> dict[str, str]:
    """Get default option values as they are written to the file."""
    defaults = ScraperConfig()
    return {
        "FILE_INPUT_DEFAULT": defaults.file_input_default,
        "TABLE_SEPARATOR": defaults.table_separator,
        "OMIT_TABLE_HEADERS": str(defaults.omit_table_headers).lower(),
        "AUTOCLOSE": str(defaults.autoclose).lower(),
        "WHOLE_ELEMENTS": str(defaults.whole_elements).lower(),
    }


def _single_quote(value: str) -> str:
    # dotenv reads \\ and \' as the only escapes inside single quotes
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def render_default_config() -> str:
    """Render the contents of a freshly created configuration file."""
    values = default_config_values()
    lines = [
        "# yawst configuration",
        "# Values in single quotes are taken literally apart from \\\\ and \\';",
        '# use double quotes for escapes such as TABLE_SEPARATOR="\\t".',
    ]
    for key, description in CONFIG_OPTIONS:
        lines.append("")
        lines.append(f"# {description}")
        lines.append(f"{key}={_single_quote(values[key])}")
    return "\n".join(lines) + "\n"


def write_default_config(path: Path) -> None:
    """Write the default configuration file.

    Raises:
        ConfigError: If the file or its directory cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_default_config(), encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Could not create config file {path}: {e}", path) from e


def parse_config(values: dict[str, Any], path: Path | None = None) -> ScraperConfig:
    """Validate raw ``KEY=value`` pairs into a ScraperConfig.

    Keys without a value fall back to their defaults; unknown keys are ignored.

    Raises:
        ConfigError: If any option has an invalid value.
    """
    present = {key: value for key, value in values.items() if value is not None}
    try:
        return ScraperConfig.model_validate(present)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}", path) from e


def load_config(path: Path | None = None) -> ScraperConfig:
    """Load configuration, creating the file with defaults if it is missing.

    Args:
        path: Configuration file; defaults to ``get_config_path()``.

    Returns:
        Immutable configuration for this run.

    Raises:
        ConfigError: If the file cannot be created, read or validated.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        write_default_config(config_path)

    try:
        values = dotenv_values(config_path, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read config file {config_path}: {e}", config_path) from e

    return parse_config(dict(values), config_path)
