"""Configuration management for tracklist."""
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from tracklist.config.file_ops import write_text_file
from tracklist.config.paths import default_config_path
from tracklist.platform.logging import logger

TRACK_GAP_SECONDS_DEFAULT: float = 0.5


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

    # Folder holding persisted playlists (defaults to ./playlists)
    playlist_dir: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # Playback pacing
    track_gap_seconds: float = TRACK_GAP_SECONDS_DEFAULT
    simulate_playback: bool = True

    # Singleton instance
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

        lines.append("# tracklist Configuration File")
        lines.append("")

        lines.append("# Folder holding saved playlists (optional)")
        lines.append("# Defaults to ./playlists beneath the working directory")
        lines.append('# Example: playlist_dir = "/path/to/playlists"')
        if config["playlist_dir"] is not None:
            lines.append(f"playlist_dir = {self._format_toml_value(config['playlist_dir'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/tracklist.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Pause between tracks during playback, in seconds")
        lines.append(
            f"track_gap_seconds = {self._format_toml_value(config['track_gap_seconds'])}"
        )
        lines.append("")

        lines.append("# Block for each track's duration while playing (default true)")
        lines.append(
            f"simulate_playback = {self._format_toml_value(config['simulate_playback'])}"
        )
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
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, creating a default one when missing.

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

                _ = config_dict.setdefault("track_gap_seconds", TRACK_GAP_SECONDS_DEFAULT)
                _ = config_dict.setdefault("simulate_playback", True)

                known = {f.name for f in fields(cls)}
                for key in list(config_dict):
                    if key not in known:
                        logger.warning("Ignoring unknown configuration key: %s", key)
                        del config_dict[key]

                for key, value in config_dict.items():
                    if key.endswith("_dir") or key.endswith("_file"):
                        if isinstance(value, str) and value.strip() != "":
                            config_dict[key] = value
                        else:
                            config_dict[key] = None

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.debug("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
