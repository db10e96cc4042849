"""Read-only ``key = value`` configuration for dlist.

The config file is optional. A missing or unreadable file yields an empty
mapping so callers fall back to their defaults.
"""

from pathlib import Path
from typing import Dict, Iterable

from dlist.core.logging_utils import get_module_logger


logger = get_module_logger("ConfigManager")


class ConfigManager:

    # ------------------------------------------------------------------
    # Internal helpers

    def _parse_config_lines(self, lines: Iterable[str]) -> Dict[str, str]:
        config: Dict[str, str] = {}

        for raw_line in lines:
            line = raw_line.strip()
            if not line or line.startswith('#'):
                continue
            if '=' not in line:
                continue

            key, value = line.split('=', 1)
            key = key.strip()
            value = value.strip()

            if '#' in value:
                value = value.split('#')[0].strip()

            if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
                value = value[1:-1]

            config[key] = value

        return config

    def read_config(self, config_path: Path) -> Dict[str, str]:
        if not config_path.exists():
            logger.debug("No config file at %s", config_path)
            return {}

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                return self._parse_config_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read config %s: %s", config_path, e)
            return {}

    def get_bool(self, config: Dict[str, str], key: str, default: bool = False) -> bool:
        if key not in config:
            return default

        value = config[key].lower()
        return value in ('true', '1', 'yes', 'on')

    def get_str(self, config: Dict[str, str], key: str, default: str = "") -> str:
        return config.get(key, default)

    def get_choice(self, config: Dict[str, str], key: str, choices: Iterable[str], default: str) -> str:
        value = config.get(key, default).lower()
        allowed = set(choices)
        if value not in allowed:
            logger.warning("Invalid value for %s: %s, using default %s", key, config[key], default)
            return default
        return value


_config_manager = ConfigManager()


def get_config_manager() -> ConfigManager:
    return _config_manager


__all__ = ["ConfigManager", "get_config_manager"]
