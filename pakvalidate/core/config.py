"""
Library configuration

Settings are read from an optional JSON file and then overridden by
environment variables:

    pakvalidate.json            {"log_level": "DEBUG", "log_file": "pakvalidate.log"}
    PAKVALIDATE_LOG_LEVEL       overrides log_level
    PAKVALIDATE_LOG_FILE        overrides log_file

A missing file means defaults. An unreadable file is reported and ignored.
"""
import json
import logging
import os
from typing import Any, Dict, Optional

DEFAULT_CONFIG_FILE = 'pakvalidate.json'

ENV_LOG_LEVEL = 'PAKVALIDATE_LOG_LEVEL'
ENV_LOG_FILE = 'PAKVALIDATE_LOG_FILE'

DEFAULTS: Dict[str, Any] = {
    'log_level': 'WARNING',
    'log_file': None,
}

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

# utils.logger depends on this module, so report problems through stdlib logging
_log = logging.getLogger('PakValidate.config')


class Config:
    """Configuration values for logging"""

    def __init__(self, config_path: Optional[str] = None):
        if config_path is None:
            config_path = os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)

        self.config_path = config_path
        self.settings: Dict[str, Any] = dict(DEFAULTS)
        self.load()

    def load(self):
        """Load the JSON file (if any), then apply environment overrides"""
        self.settings = dict(DEFAULTS)

        try:
            if os.path.exists(self.config_path):
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    for key in DEFAULTS:
                        if key in data:
                            self.settings[key] = data[key]
                else:
                    _log.error(f"Config file {self.config_path} must hold a JSON object")
        except (OSError, ValueError) as e:
            _log.error(f"Failed to load config {self.config_path}: {e}")

        env_level = os.environ.get(ENV_LOG_LEVEL)
        if env_level:
            self.settings['log_level'] = env_level

        env_file = os.environ.get(ENV_LOG_FILE)
        if env_file:
            self.settings['log_file'] = env_file

    def get_log_level(self) -> str:
        """Log level name; unknown names fall back to WARNING"""
        level = str(self.settings.get('log_level') or '').strip().upper()
        if level not in VALID_LOG_LEVELS:
            return DEFAULTS['log_level']
        return level

    def get_log_file(self) -> Optional[str]:
        log_file = self.settings.get('log_file')
        return log_file or None
