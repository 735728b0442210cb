"""Configuration management for Star Shell with JSON-backed config and themes."""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

CONFIG_FILE_NAME = "config.json"
THEMES_DIR_NAME = "themes"
DOWNLOADS_DIR_NAME = "downloads"


class ConfigurationError(Exception):
    """Configuration-related errors that prevent the shell from starting."""

    pass


class ShellConfig(BaseModel):
    """Startup configuration, immutable for the session."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    prompt: str = Field(default="$", description="Prompt string")
    initial_commands: List[str] = Field(
        default_factory=list,
        alias="initialCommands",
        description="Commands executed in order before the interactive loop",
    )
    theme: str = Field(default="light", description="Theme name")
    wget_enabled: bool = Field(
        default=True, alias="wgetEnabled", description="Enable the wget command"
    )


class Theme(BaseModel):
    """Five named colors used for every piece of shell output."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text_color: str = Field(alias="textColor")
    background_color: str = Field(alias="backgroundColor")
    prompt_color: str = Field(alias="promptColor")
    error_color: str = Field(alias="errorColor")
    output_color: str = Field(alias="outputColor")

    @field_validator("*", mode="before")
    @classmethod
    def strip_color(cls, v):
        """Normalize color specs."""
        if isinstance(v, str):
            return v.strip()
        return v


DEFAULT_THEMES: Dict[str, Theme] = {
    "light": Theme(
        text_color="black",
        background_color="white",
        prompt_color="blue",
        error_color="red",
        output_color="green",
    ),
    "dark": Theme(
        text_color="white",
        background_color="black",
        prompt_color="cyan",
        error_color="red",
        output_color="green",
    ),
}


def load_environment_variables() -> Dict[str, Any]:
    """Load configuration overrides from STARSHELL_* environment variables."""
    config = {}
    prefix = "STARSHELL_"

    for key, value in os.environ.items():
        if key.startswith(prefix):
            config_key = key[len(prefix) :].lower()

            # Handle boolean values
            if value.lower() in ("true", "1", "yes", "on"):
                config[config_key] = True
            elif value.lower() in ("false", "0", "no", "off"):
                config[config_key] = False
            else:
                # Try to convert to int, fallback to string
                try:
                    config[config_key] = int(value)
                except ValueError:
                    config[config_key] = value

    return config


def get_home_dir() -> Path:
    """Directory holding config.json, themes/ and downloads/."""
    # Read raw: a path such as "1" or "on" must not be coerced.
    home = os.environ.get("STARSHELL_HOME", "").strip()
    if home:
        return Path(home).expanduser().resolve()
    return Path.cwd()


def _read_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Failed to parse {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read {path}: {e}") from e


def _write_json(path: Path, data: Dict[str, Any]) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
    except OSError as e:
        raise ConfigurationError(f"Failed to write {path}: {e}") from e


def save_config(config: ShellConfig, config_path: Path) -> None:
    """Save configuration to file using the persisted camelCase field names."""
    _write_json(config_path, config.model_dump(by_alias=True))


def save_theme(theme: Theme, theme_path: Path) -> None:
    """Save a theme to file."""
    _write_json(theme_path, theme.model_dump(by_alias=True))


def create_default_themes(themes_dir: Path) -> List[Path]:
    """Write the default light and dark themes, returning the written paths."""
    written = []
    for name, theme in DEFAULT_THEMES.items():
        path = themes_dir / f"{name}.json"
        save_theme(theme, path)
        written.append(path)
    return written


def load_config_file(config_path: Path) -> ShellConfig:
    """Load the startup configuration, creating the default one if absent."""
    if not config_path.exists():
        config = ShellConfig()
        save_config(config, config_path)
        return config

    data = _read_json(config_path)
    if not isinstance(data, dict):
        raise ConfigurationError(f"Failed to parse {config_path}: expected an object")
    try:
        return ShellConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e


def load_theme(theme_name: str, themes_dir: Path) -> Theme:
    """Load a named theme, generating the default themes on first run."""
    theme_path = themes_dir / f"{theme_name}.json"

    if not theme_path.exists():
        create_default_themes(themes_dir)
        if not theme_path.exists():
            raise ConfigurationError(
                f"Theme '{theme_name}' not found in {themes_dir}. "
                f"Available defaults: {', '.join(DEFAULT_THEMES)}"
            )

    data = _read_json(theme_path)
    if not isinstance(data, dict):
        raise ConfigurationError(f"Failed to parse {theme_path}: expected an object")
    try:
        return Theme.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid theme in {theme_path}: {e}") from e


def load_configuration(home: Optional[Path] = None) -> Tuple[ShellConfig, Theme]:
    """Load configuration and the theme it selects.

    Missing files are created with defaults. A file that exists but cannot be
    read or parsed raises ConfigurationError, since no safe default can be
    assumed once a file is known to be present.
    """
    if home is None:
        home = get_home_dir()
    home = Path(home)

    config = load_config_file(home / CONFIG_FILE_NAME)
    theme = load_theme(config.theme, home / THEMES_DIR_NAME)
    return config, theme
