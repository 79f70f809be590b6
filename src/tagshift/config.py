"""Configuration management for tagshift.

Handles loading and saving user preferences: which tag formats are enabled,
how multi-valued artists are joined and which ID3v2 revision is written.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Set, Union

import tomli_w

from .constants import DEFAULT_ID3V2_VERSION, SEP_ARTIST, SUPPORTED_ID3V2_VERSIONS
from .formats import enabled_tag_types
from .tag import TagType

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory (~/.tagshift on all platforms)
    """
    return Path.home() / ".tagshift"


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / "config.toml"


class Config:
    """Configuration manager for application settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "formats": {
            # One flag per tag type; a disabled type is refused on read
            tag_type.value: True
            for tag_type in TagType
        },
        "tagging": {
            "artist_separator": SEP_ARTIST,
            # ID3v2 revision to write: 3 or 4
            "id3v2_version": DEFAULT_ID3V2_VERSION,
        },
        "logging": {
            # Used by the CLI when --log-level is not given
            "level": "warning",
        },
    }

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_path: Config file to use instead of ~/.tagshift/config.toml
        """
        self.config_path = Path(config_path) if config_path else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Error loading config %s: %s", self.config_path, e)
            return False

        # Merge with defaults (in case new keys were added)
        self._merge_config(self.data, loaded_data)
        self._dirty = False
        return True

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
        except OSError as e:
            logger.warning("Error saving config %s: %s", self.config_path, e)
            return False

        self._dirty = False
        return True

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def is_dirty(self) -> bool:
        """Check if configuration has unsaved changes."""
        return self._dirty

    # Format settings
    def is_format_enabled(self, tag_type: TagType) -> bool:
        return bool(self.data["formats"].get(tag_type.value, True))

    def set_format_enabled(self, tag_type: TagType, enabled: bool) -> None:
        self.data["formats"][tag_type.value] = enabled
        self._dirty = True

    def get_enabled_tag_types(self) -> Set[TagType]:
        """Get the tag types that may be read."""
        return enabled_tag_types(self.data["formats"])

    # Tagging settings
    def get_artist_separator(self) -> str:
        separator = self.data["tagging"].get("artist_separator")
        if not separator:
            return SEP_ARTIST
        return separator

    def set_artist_separator(self, separator: str) -> None:
        """Set the separator used to join multiple artists.

        Raises:
            ValueError: If separator is empty
        """
        if not separator:
            raise ValueError("Artist separator must not be empty")
        self.data["tagging"]["artist_separator"] = separator
        self._dirty = True

    def get_id3v2_version(self) -> int:
        """Get the ID3v2 revision to write (3 or 4).

        Unsupported values in the file fall back to the default.
        """
        version = self.data["tagging"].get("id3v2_version", DEFAULT_ID3V2_VERSION)
        if version not in SUPPORTED_ID3V2_VERSIONS:
            logger.warning("Unsupported id3v2_version %r, using %d", version, DEFAULT_ID3V2_VERSION)
            return DEFAULT_ID3V2_VERSION
        return version

    def set_id3v2_version(self, version: int) -> None:
        """Set the ID3v2 revision to write.

        Raises:
            ValueError: If version is not 3 or 4
        """
        if version not in SUPPORTED_ID3V2_VERSIONS:
            raise ValueError(f"ID3v2 version must be one of {SUPPORTED_ID3V2_VERSIONS}")
        self.data["tagging"]["id3v2_version"] = version
        self._dirty = True

    # Logging settings
    def get_log_level(self) -> str:
        return self.data["logging"].get("level", "warning")

    def set_log_level(self, level: str) -> None:
        self.data["logging"]["level"] = level
        self._dirty = True
