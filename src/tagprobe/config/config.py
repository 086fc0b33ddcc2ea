"""Configuration management for tagprobe."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from tagprobe.config.file_ops import ensure_file_with_template, write_text_file
from tagprobe.config.paths import default_config_path
from tagprobe.platform.logging import logger
from tagprobe.shared import ExtractionRequest


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects converted in ``__post_init__``."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Default extraction flags for the CLI
    need_cover: bool = False
    need_lyrics: bool = False
    need_audio_properties: bool = True
    need_extra_tags: bool = True

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def default_request(self) -> ExtractionRequest:
        """Build the extraction request implied by the configured flags."""

        return ExtractionRequest(
            need_cover=self.need_cover,
            need_lyrics=self.need_lyrics,
            need_audio_properties=self.need_audio_properties,
            need_extra_tags=self.need_extra_tags,
        )

    def save(self, target: Path | None = None) -> Path:
        """Save configuration as commented TOML and return the written path."""

        target = target or default_config_path()
        try:
            write_text_file(target, self.render_toml())
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def save_if_missing(self, target: Path | None = None) -> bool:
        """Write the configuration only when no file exists yet."""

        target = target or default_config_path()
        created = ensure_file_with_template(target, template_provider=self.render_toml)
        if created:
            logger.info("Created default configuration at %s", target)
        return created

    def render_toml(self) -> str:
        """Render configuration as TOML with inline guidance."""

        config = asdict(self)
        lines: list[str] = ["# tagprobe configuration file", ""]

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/tagprobe.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Fields the CLI extracts when no flag is given")
        for key in ("need_cover", "need_lyrics", "need_audio_properties", "need_extra_tags"):
            lines.append(f"{key} = {self._format_toml_value(config[key])}")
        lines.append("")

        return "\n".join(lines)

    @staticmethod
    def _format_toml_value(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration, returning defaults when the file does not exist.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
        """
        config_file = config_file or default_config_path()
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if config_file.exists():
            with open(config_file, "rb") as f:
                try:
                    config_dict = tomllib.load(f)
                except tomllib.TOMLDecodeError as e:
                    logger.error("Failed to load configuration from %s: %s", config_file, e)
                    raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            logger.debug("Configuration loaded from %s", config_file)
        else:
            instance = cls()

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config"]
