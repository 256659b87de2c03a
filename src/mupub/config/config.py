"""Configuration management for mupub."""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from mupub.config.file_ops import write_text_file
from mupub.config.paths import default_config_path
from mupub.platform.logging import logger

FUGA_BASE_URL_DEFAULT: Final[str] = "https://api.fuga.com"
TUNECORE_BASE_URL_DEFAULT: Final[str] = "https://api.tunecore.com"

# Environment variables that take precedence over file values.
ENV_OVERRIDES: Final[dict[str, str]] = {
    "fuga_api_key": "FUGA_API_TOKEN",
    "fuga_base_url": "FUGA_API_BASE_URL",
    "tunecore_partner_id": "TUNECORE_PARTNER_ID",
    "tunecore_api_key": "TUNECORE_API_KEY",
    "tunecore_base_url": "TUNECORE_API_BASE_URL",
}


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Root of the Artist/Album tree used by ``scan`` when no path is given
    music_root: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # Platform forced for every command unless overridden on the command line
    default_platform: str | None = None

    # FUGA credentials
    fuga_api_key: str | None = None
    fuga_base_url: str | None = FUGA_BASE_URL_DEFAULT

    # TuneCore credentials
    tunecore_partner_id: str | None = None
    tunecore_api_key: str | None = None
    tunecore_base_url: str | None = TUNECORE_BASE_URL_DEFAULT

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def credentials(self, env: Mapping[str, str] | None = None) -> dict[str, str | None]:
        """Return platform credentials with environment overrides applied.

        Args:
            env: Environment mapping; defaults to ``os.environ``.

        Returns:
            dict[str, str | None]: Credential values keyed by config field name.
        """
        mapping = env if env is not None else os.environ
        resolved: dict[str, str | None] = {}
        for name, env_var in ENV_OVERRIDES.items():
            override = (mapping.get(env_var) or "").strip()
            resolved[name] = override or getattr(self, name)
        return resolved

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# mupub Configuration File")
        lines.append("")

        lines.append("# Root of your Artist/Album release tree (optional)")
        lines.append('# Example: music_root = "/path/to/music"')
        if config["music_root"] is not None:
            lines.append(f"music_root = {self._format_toml_value(config['music_root'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/mupub.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Platform used instead of auto-detection (optional): fuga or tunecore")
        if config.get("default_platform"):
            lines.append(
                f"default_platform = {self._format_toml_value(config['default_platform'])}"
            )
        lines.append("")

        lines.append("# Platform credentials (optional)")
        lines.append("# Environment variables override these values:")
        for name, env_var in ENV_OVERRIDES.items():
            lines.append(f"#   {name} <- {env_var}")
        for name in ENV_OVERRIDES:
            if config.get(name):
                lines.append(f"{name} = {self._format_toml_value(config[name])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    raw = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                config_dict: dict[str, Any] = {}
                for key, value in raw.items():
                    if key not in known:
                        logger.warning("Ignoring unknown configuration key: %s", key)
                        continue
                    if isinstance(value, str) and not value.strip():
                        value = None
                    config_dict[key] = value

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise
