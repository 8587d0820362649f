"""Configuration and settings storage for PTO Plan.

Configuration is split into two files:

1. settings.json - Machine-specific tool settings
   - profile: path to profile.yaml (optional, if not colocated)

2. profile.yaml - The user's PTO settings
   - balance, accrual rate, pay schedule
   - planned vacations
   - accrual bookkeeping (last update date, last known balance)

Config directory resolution:
1. PTO_PLAN_CONFIG_PATH environment variable (if set)
2. ~/.config/pto-plan/ (XDG_CONFIG_HOME fallback)

Profile resolution:
1. settings.json "profile" key (if set via CLI)
2. profile.yaml in same config directory

The store writes whole files; concurrent writers are last-write-wins.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .schemas import UserSettings


APP_NAME = "pto-plan"
SETTINGS_FILENAME = "settings.json"
PROFILE_FILENAME = "profile.yaml"


class ProfileNotFoundError(Exception):
    """Raised when no profile is found."""
    pass


class ProfileValidationError(Exception):
    """Raised when profile.yaml does not match the UserSettings schema."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. PTO_PLAN_CONFIG_PATH environment variable
    2. ~/.config/pto-plan/ (XDG_CONFIG_HOME)
    """
    env_path = os.environ.get("PTO_PLAN_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def set_setting(key: str, value: Any) -> Path:
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def get_profile_path(require_exists: bool = False) -> Path:
    """Get the path to the profile.yaml file.

    Args:
        require_exists: If True, raises ProfileNotFoundError if not found

    Returns:
        Path to profile.yaml

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
    """
    custom_profile = load_settings().get("profile")
    if custom_profile:
        profile_path = Path(custom_profile)
        if require_exists and not profile_path.exists():
            raise ProfileNotFoundError(
                f"Profile not found at configured path: {profile_path}\n\n"
                f"Update with: pto-plan profile use /path/to/profile.yaml"
            )
        return profile_path

    profile_path = get_config_dir() / PROFILE_FILENAME
    if require_exists and not profile_path.exists():
        raise ProfileNotFoundError(
            f"No profile found at {profile_path}\n\n"
            f"Create one with: pto-plan profile init"
        )
    return profile_path


def load_profile(require_exists: bool = True) -> dict:
    """Load the raw profile dictionary from profile.yaml.

    Returns:
        Profile dictionary (empty dict if not required and not found)
    """
    profile_path = get_profile_path(require_exists=require_exists)

    if not profile_path.exists():
        return {}

    with open(profile_path, "r") as f:
        return yaml.safe_load(f) or {}


def save_profile(profile: dict, path: Optional[Path] = None) -> Path:
    if path is None:
        path = get_profile_path(require_exists=False)

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(profile, f, default_flow_style=False, sort_keys=False)

    return path


def load_user_settings(require_exists: bool = True) -> UserSettings:
    """Load and validate the user's PTO settings.

    Args:
        require_exists: If False, a missing profile yields default settings

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
        ProfileValidationError: If the profile fails schema validation
    """
    profile = load_profile(require_exists=require_exists)
    try:
        return UserSettings.model_validate(profile)
    except ValidationError as e:
        raise ProfileValidationError(
            f"Invalid profile {get_profile_path()}:\n{e}"
        )


def save_user_settings(settings: UserSettings) -> Path:
    return save_profile(settings.to_storage())


def update_user_settings(updates: Dict[str, Any]) -> UserSettings:
    """Apply a partial update to the stored settings and save them.

    Args:
        updates: Field name -> new value, e.g. {"current_pto": 104.0}

    Returns:
        The updated, validated settings

    Raises:
        ProfileValidationError: If the update produces invalid settings
    """
    current = load_user_settings(require_exists=False)
    merged = {**current.to_storage(), **updates}
    try:
        updated = UserSettings.model_validate(merged)
    except ValidationError as e:
        raise ProfileValidationError(f"Invalid settings update:\n{e}")
    save_user_settings(updated)
    return updated
