import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any

import orjson

from tuilade.data_types.enums import TreeType
from tuilade.errors import SchemaError, SettingsError

logger = logging.getLogger(__name__)

default_settings = os.path.join(os.path.dirname(__file__), "settings.json")


@dataclass(frozen=True)
class RenderSettings:
    silent: bool = False
    suppress_swallows: bool = False
    expand_from: TreeType = TreeType.WORKSPACE
    show_ancestors: bool = False

    def update(self, **overrides: Any) -> "RenderSettings":
        """Returns a copy with every override that is not None applied"""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def user_settings_path() -> str:
    if path := os.environ.get("TUILADE_SETTINGS"):
        return path
    return os.path.join(
        os.path.expanduser(os.environ.get("XDG_CONFIG_HOME") or "~/.config"),
        "tuilade",
        "settings.json",
    )


def read_settings_file(path: str) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            content = orjson.loads(f.read())
    except orjson.JSONDecodeError as e:
        raise SettingsError(f'Settings file {path} is not valid JSON: "{e}"') from e
    except OSError as e:
        raise SettingsError(f'Could not read settings file {path}: "{e}"') from e

    if not isinstance(content, dict):
        raise SettingsError(f"Settings file {path} must hold a JSON object")
    return content


def apply_settings(base: RenderSettings, content: dict[str, Any]) -> RenderSettings:
    known = {f.name for f in fields(RenderSettings)}
    values: dict[str, Any] = {}
    for key, value in content.items():
        if key not in known:
            raise SettingsError(f'Unknown setting "{key}"')
        if key == "expand_from":
            if not isinstance(value, str):
                raise SettingsError('"expand_from" must be a string')
            try:
                values[key] = TreeType.parse(value)
            except SchemaError as e:
                raise SettingsError(str(e)) from None
        elif isinstance(value, bool):
            values[key] = value
        else:
            raise SettingsError(f'"{key}" must be true or false')
    return replace(base, **values)


def load_settings(settings_path: str | None = None) -> RenderSettings:
    """
    Packaged defaults, overlaid with the user's settings file. An explicitly
    given path has to exist; the implicit one is optional.
    """
    settings = apply_settings(RenderSettings(), read_settings_file(default_settings))

    if settings_path is None:
        settings_path = user_settings_path()
        if not os.path.exists(settings_path):
            logger.debug("No user settings at %s, using defaults", settings_path)
            return settings
    elif not os.path.exists(settings_path):
        raise SettingsError(f"Path to file does not exist: {settings_path}")

    logger.debug("Loading settings from %s", settings_path)
    return apply_settings(settings, read_settings_file(settings_path))
