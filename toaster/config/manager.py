from __future__ import annotations

import copy
import logging
import os
import tomllib
from pathlib import Path

from toaster.config.defaults import DEFAULT_CONFIG, get_toast_defaults

log = logging.getLogger(__name__)


class ConfigManager:
    def __init__(self, config_path: str | None = None) -> None:
        if config_path is not None:
            self._config_path = Path(config_path).expanduser()
        else:
            xdg = os.environ.get("XDG_CONFIG_HOME", "~/.config")
            self._config_path = Path(xdg).expanduser() / "toaster" / "config.toml"
        self._config: dict = {}

    @property
    def path(self) -> Path:
        return self._config_path

    @property
    def config(self) -> dict:
        if not self._config:
            self._config = self.load()
        return self._config

    def load(self) -> dict:
        defaults = copy.deepcopy(DEFAULT_CONFIG)
        if not self._config_path.exists():
            log.info("Writing default config to %s", self._config_path)
            self.save(defaults)
            self._config = defaults
            return defaults

        with open(self._config_path, "rb") as f:
            user_config = tomllib.load(f)

        merged = self._deep_merge(defaults, user_config)
        self._config = merged
        return merged

    def _deep_merge(self, base: dict, override: dict) -> dict:
        result = base.copy()
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def save(self, config: dict) -> None:
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._config_path, "w") as f:
            f.write(self._dict_to_toml(config))

    def get(self, key_path: str, default: object = None) -> object:
        keys = key_path.split(".")
        current: object = self.config
        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current

    def toast_settings(self) -> dict[str, object]:
        """The ``[toast]`` defaults applied to every toast the app shows."""
        return get_toast_defaults(self.config)

    # ------------------------------------------------------------------
    # Minimal TOML serializer (no tomli_w dependency)
    # ------------------------------------------------------------------

    def _dict_to_toml(self, d: dict, prefix: str = "") -> str:
        lines: list[str] = []
        tables: list[tuple[str, dict]] = []

        for key, value in d.items():
            full_key = f"{prefix}.{key}" if prefix else key
            if isinstance(value, dict):
                tables.append((full_key, value))
            else:
                lines.append(f"{key} = {self._toml_value(value)}")

        result = "\n".join(lines)
        for full_key, table in tables:
            result += f"\n[{full_key}]\n" + self._dict_to_toml(table, prefix=full_key)

        return result

    @staticmethod
    def _toml_value(value: object) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        if isinstance(value, list):
            items = ", ".join(ConfigManager._toml_value(item) for item in value)
            return f"[{items}]"
        return str(value)
