"""
MargDarshak Provider Settings
Resolves provider API keys from the environment (.env) or the local settings file.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from config.parameters import (
    DEFAULT_SETTINGS_PATH,
    LOCAL_SETTINGS_KEYS,
    PROVIDER_ENV_VARS,
    SETTINGS_PATH_ENV,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderKeys:
    """API keys for the two text-generation providers. Either may be missing."""

    openrouter: Optional[str] = None
    groq: Optional[str] = None

    def any(self) -> bool:
        return bool(self.openrouter or self.groq)


def settings_path() -> Path:
    """Location of the locally persisted settings file."""
    return Path(os.environ.get(SETTINGS_PATH_ENV) or DEFAULT_SETTINGS_PATH).expanduser()


def load_local_settings(path: Optional[Path] = None) -> dict:
    """
    Read the local key-value settings file.

    Returns an empty dict when the file is missing or unreadable.
    """
    path = path or settings_path()
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read settings file %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def save_local_key(provider: str, value: str, path: Optional[Path] = None) -> Path:
    """
    Persist an API key for *provider* ("openrouter" or "groq") in the settings file.

    An empty value removes the stored key.

    Raises:
        KeyError: If *provider* is not a known provider name.
    """
    if provider not in LOCAL_SETTINGS_KEYS:
        raise KeyError(
            f"Unknown provider '{provider}'. "
            f"Valid providers: {', '.join(sorted(LOCAL_SETTINGS_KEYS))}"
        )
    path = path or settings_path()
    data = load_local_settings(path)
    setting = LOCAL_SETTINGS_KEYS[provider]
    if value and value.strip():
        data[setting] = value.strip()
    else:
        data.pop(setting, None)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    logger.info("Saved %s setting to %s", setting, path)
    return path


def resolve_key(provider: str, local_settings: Optional[dict] = None) -> Optional[str]:
    """
    Resolve one provider key: VITE_-prefixed env var, unprefixed env var,
    then the local settings file. Empty values count as missing.
    """
    for var in PROVIDER_ENV_VARS[provider]:
        value = os.environ.get(var)
        if value:
            return value

    if local_settings is None:
        local_settings = load_local_settings()
    value = local_settings.get(LOCAL_SETTINGS_KEYS[provider])
    return value or None


def resolve_keys(load_env: bool = True) -> ProviderKeys:
    """Build ProviderKeys from the environment and local settings."""
    if load_env:
        load_dotenv()
    local_settings = load_local_settings()
    return ProviderKeys(
        openrouter=resolve_key("openrouter", local_settings),
        groq=resolve_key("groq", local_settings),
    )
