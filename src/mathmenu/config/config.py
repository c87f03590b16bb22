"""Configuration management for mathmenu."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from mathmenu.config.file_ops import write_text_file
from mathmenu.config.paths import default_config_path
from mathmenu.config.settings import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_INDENT,
    FACTORIAL_DISPLAY_DIGITS,
    FACTORIAL_WARNING_THRESHOLD,
)
from mathmenu.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with metadata marking it as a path.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path (defaults to <repo_root>/logs/mathmenu.log when unset)
    log_file: Path | None = _path_field()

    # Console log level name
    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL

    # Tab depth used for every console message
    indent: int = DEFAULT_INDENT

    # Digits of a factorial sum shown before truncating
    factorial_display_digits: int = FACTORIAL_DISPLAY_DIGITS

    # Terms above this value log a slowness warning
    factorial_warning_threshold: int = FACTORIAL_WARNING_THRESHOLD

    # Singleton instance
    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and clamp numeric fields."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if not isinstance(self.indent, int) or self.indent < 0:
            self.indent = DEFAULT_INDENT
        if not isinstance(self.factorial_display_digits, int) or self.factorial_display_digits <= 0:
            self.factorial_display_digits = FACTORIAL_DISPLAY_DIGITS
        if not isinstance(self.factorial_warning_threshold, int) or self.factorial_warning_threshold < 0:
            self.factorial_warning_threshold = FACTORIAL_WARNING_THRESHOLD

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            write_text_file(target, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# mathmenu Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Where to store the application logs")
        lines.append('# Example: log_file = "/path/to/logs/mathmenu.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log level (DEBUG, INFO, WARNING, ERROR)")
        lines.append(
            f"console_log_level = {self._format_toml_value(config['console_log_level'])}"
        )
        lines.append("")

        lines.append("# Number of tabs used to indent console messages")
        lines.append(f"indent = {self._format_toml_value(config['indent'])}")
        lines.append("")

        lines.append("# Factorial sums longer than this many digits are truncated on display")
        lines.append(
            f"factorial_display_digits = {self._format_toml_value(config['factorial_display_digits'])}"
        )
        lines.append("")

        lines.append("# Factorial terms above this value log a slowness warning")
        lines.append(
            "factorial_warning_threshold = "
            + self._format_toml_value(config["factorial_warning_threshold"])
        )
        lines.append("")

        return "\n".join(lines)

    @staticmethod
    def _format_toml_value(value: Any) -> str:
        """Format a Python value as a TOML literal."""

        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from the default path.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                config_dict = {k: v for k, v in config_dict.items() if k in known}

                logger.info("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)
                cls._instance = instance
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


__all__ = ["Config"]
