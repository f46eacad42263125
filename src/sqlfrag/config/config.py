"""Configuration loading for connection profiles and builder settings."""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Union, Optional, Any

# Use tomllib for Python 3.11+, fallback to tomli for older versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        raise ImportError(
            "Python < 3.11 requires 'tomli' package. " +
            "Install it with: pip install tomli"
        )

from sqlfrag.utils.identifiers import IDENTIFIER_QUOTES

from .paths import resolve_config_path

BUILDER_KEY = "builder"


@dataclass(frozen=True)
class BuilderSettings:
    """Rendering options for composed statements

    Attributes:
        quote: Identifier quote character, backtick (MySQL) or double quote (ANSI)
        column_mapping: Extra filter key => column entries for the filter mapper,
            stored as a read-only copy
    """

    quote: str = "`"
    column_mapping: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Validate the quote character and freeze the column mapping"""
        object.__setattr__(self, "column_mapping", MappingProxyType(dict(self.column_mapping)))
        if self.quote not in IDENTIFIER_QUOTES:
            raise ValueError(
                f"Invalid identifier quote {self.quote!r}. " +
                f"Expected one of: {', '.join(IDENTIFIER_QUOTES)}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BuilderSettings":
        """Create settings from a profile's builder table, ignoring unknown keys"""
        kwargs: Dict[str, Any] = {}
        if "quote" in data:
            kwargs["quote"] = data["quote"]
        if "column_mapping" in data:
            kwargs["column_mapping"] = dict(data["column_mapping"])
        return cls(**kwargs)


def _read_profiles(config_file: Path) -> Dict[str, Any]:
    with open(config_file, "rb") as f:
        return tomllib.load(f)


def load_profile(
    profile: str,
    path: Optional[Union[str, Path]] = None
) -> Dict[str, Any]:
    """
    Load a connection profile from connections.toml file.

    Args:
        profile: Name of the profile to load
        path: Optional explicit path to connections.toml file.
              If None, searches in standard locations.

    Returns:
        Dictionary containing the profile, including its optional builder table

    Raises:
        FileNotFoundError: If connections.toml file is not found
        KeyError: If the specified profile doesn't exist in the file

    Example:
        >>> config = load_profile("dev")
        >>> config
        {'account': 'myaccount', 'user': 'myuser', 'builder': {'quote': '"'}}
    """
    config_file = resolve_config_path(path)

    if not config_file.exists():
        raise FileNotFoundError(
            f"sqlfrag configuration file not found at {config_file}. " +
            "Create a connections.toml file with one table per profile."
        )

    all_profiles = _read_profiles(config_file)

    if profile not in all_profiles:
        available = ", ".join(all_profiles.keys())
        raise KeyError(
            f"Profile '{profile}' not found in {config_file}. " +
            f"Available profiles: {available}"
        )

    return all_profiles[profile]


def list_profiles(path: Optional[Union[str, Path]] = None) -> list[str]:
    """
    List all available profiles in connections.toml file.

    Args:
        path: Optional explicit path to connections.toml file

    Returns:
        List of profile names
    """
    config_file = resolve_config_path(path)

    if not config_file.exists():
        return []

    return list(_read_profiles(config_file).keys())


def load_settings(
    profile: Optional[str] = None,
    path: Optional[Union[str, Path]] = None
) -> BuilderSettings:
    """
    Load builder settings from the builder table of a profile.

    Args:
        profile: Profile name, or None for default settings
        path: Optional explicit path to connections.toml file

    Returns:
        BuilderSettings, with defaults for anything the profile leaves out

    Example:
        >>> settings = load_settings("dev")
        >>> settings.quote
        '"'
    """
    if profile is None:
        return BuilderSettings()
    return BuilderSettings.from_dict(load_profile(profile, path).get(BUILDER_KEY, {}))
