#!/usr/bin/env python3
"""
tcdinspect Configuration Management
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .config_store import ConfigStore
from .core.constants import (
    DECODER_ENV_VAR,
    PRIMARY_OUTPUT_ENCODING,
    STAGED_BASE_NAME,
    STAGED_EXTENSION,
    WORKAREA_PREFIX,
)
from .core.decoder_runner import default_decoder


class Config:
    """Configuration manager for tcdinspect"""

    DEFAULT_CONFIG = {
        "decoder": {"executable": None, "timeout": None},
        "workarea": {
            "prefix": WORKAREA_PREFIX,
            "base_name": STAGED_BASE_NAME,
            "extension": STAGED_EXTENSION,
            "parent_dir": None,
        },
        "output": {"primary_encoding": PRIMARY_OUTPUT_ENCODING, "json_indent": 2},
        "batch": {"max_workers": 4, "extensions": [".tcd"]},
    }

    def __init__(self, config_path: Optional[str] = None):
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.config_path = config_path or self._get_default_config_path()

        # Load configuration if exists
        if os.path.exists(self.config_path):
            self.load_config()
        else:
            self.save_config()  # Create default config

    def _get_default_config_path(self) -> str:
        """Get default configuration file path"""
        return str(Path.home() / ".tcdinspect" / "config.json")

    def load_config(self):
        """Load configuration from file"""
        user_config = ConfigStore.load(self.config_path)
        if user_config:
            self._merge_config(user_config)

    def save_config(self):
        """Save configuration to file"""
        ConfigStore.save(self.config_path, self.config)

    def _merge_config(self, user_config: Dict[str, Any]):
        """Merge user configuration with defaults"""
        for section, settings in user_config.items():
            if section in self.config and isinstance(settings, dict):
                self.config[section].update(settings)
            else:
                self.config[section] = settings

    def apply_overrides(self, overrides: Dict[str, Any]):
        """Merge programmatic overrides (e.g. CLI options) without persisting them"""
        self._merge_config(copy.deepcopy(overrides))

    def get(self, section: str, key: str = None, default=None):
        """Get configuration value"""
        if key is None:
            return self.config.get(section, default)
        value = self.config.get(section, {}).get(key)
        return default if value is None else value

    def set(self, section: str, key: str, value):
        """Set configuration value"""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    def get_decoder_executable(self) -> str:
        """TCDINSPECT_DECODER, else the config file, else restore_tide_db"""
        env_decoder = os.getenv(DECODER_ENV_VAR, "").strip()
        return env_decoder or self.get("decoder", "executable") or default_decoder()

    def get_decoder_timeout(self) -> Optional[float]:
        timeout = self.get("decoder", "timeout")
        return float(timeout) if timeout else None

    def get_batch_extensions(self) -> list:
        extensions = self.get("batch", "extensions", [STAGED_EXTENSION])
        if isinstance(extensions, str):
            extensions = extensions.split(",")
        normalized = []
        for ext in extensions:
            ext = ext.strip().lower()
            if ext:
                normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized

    def __getitem__(self, key):
        """Allow dict-like access"""
        return self.config[key]

    def __contains__(self, key):
        """Allow 'in' operator"""
        return key in self.config
