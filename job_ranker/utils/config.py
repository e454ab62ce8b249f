"""
Configuration management for Job Ranker.
"""

from pathlib import Path
from typing import Optional
import copy
import json
import os

from job_ranker.core.matcher import DEFAULT_WEIGHTS
from job_ranker.core.ranking import DEFAULT_RECOMMENDATION_LIMIT, DEFAULT_RECOMMENDATION_THRESHOLD


class Config:
    """Manages scoring weights, recommendation settings and logging."""

    LOG_LEVEL_ENV_VAR = "JOB_RANKER_LOG_LEVEL"

    DEFAULT_CONFIG = {
        "matching": {
            "weights": dict(DEFAULT_WEIGHTS),
        },
        "recommendations": {
            "limit": DEFAULT_RECOMMENDATION_LIMIT,
            "threshold": DEFAULT_RECOMMENDATION_THRESHOLD,
        },
        "logging": {
            "level": "WARNING",
        },
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to config file (default: ~/.job_ranker/config.json)
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = Path.home() / ".job_ranker" / "config.json"

        self.config = self._load_config()

    def _load_config(self) -> dict:
        """Load configuration from file or fall back to defaults."""
        defaults = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path.exists():
            with open(self.config_path, 'r', encoding='utf-8') as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                raise ValueError(f"Config file {self.config_path} must contain a JSON object")

            return self._merge_section(defaults, user_config)

        return defaults

    def _merge_section(self, defaults: dict, overrides: dict) -> dict:
        """Overlay one section of the user file on the matching defaults section."""
        merged = dict(defaults)
        for name, override in overrides.items():
            current = merged.get(name)
            if isinstance(current, dict) and isinstance(override, dict):
                override = self._merge_section(current, override)
            merged[name] = override
        return merged

    def save(self) -> None:
        """Write weights, recommendation and logging settings to the config file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(self.config, f, indent=2)
            f.write("\n")

    def get(self, key: str, default=None):
        """
        Look up a setting by dotted path, e.g. "matching.weights.location".

        Returns default when any part of the path is missing.
        """
        node = self.config
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set(self, key: str, value) -> None:
        """
        Change a setting by dotted path, e.g. "recommendations.threshold".

        Missing sections are created.

        Raises:
            ValueError: if the path runs through a value that is not a section,
                as in "recommendations.limit.max".
        """
        *sections, name = key.split('.')
        node = self.config

        for i, section in enumerate(sections):
            child = node.setdefault(section, {})
            if not isinstance(child, dict):
                path = '.'.join(sections[:i + 1])
                raise ValueError(f"'{path}' is a setting, not a section; cannot set '{key}'")
            node = child

        node[name] = value

    def get_weights(self) -> dict:
        """Get the scoring weight table."""
        return dict(self.get("matching.weights", {}))

    def get_recommendation_settings(self) -> dict:
        """Get the recommendation limit and score threshold."""
        return {
            "limit": int(self.get("recommendations.limit", DEFAULT_RECOMMENDATION_LIMIT)),
            "threshold": float(self.get("recommendations.threshold", DEFAULT_RECOMMENDATION_THRESHOLD)),
        }

    def get_log_level(self) -> str:
        """
        Get the log level name.

        The JOB_RANKER_LOG_LEVEL environment variable takes precedence over
        the config file.
        """
        env_value = os.environ.get(self.LOG_LEVEL_ENV_VAR)

        if env_value:
            return env_value.upper()

        return str(self.get("logging.level", "WARNING")).upper()

    def print_config(self) -> None:
        """Print current configuration."""
        print(json.dumps(self.config, indent=2))

    @classmethod
    def create_default_config(cls, path: str = None) -> 'Config':
        """Create a new config file with default values."""
        config = cls(path)
        config.config = copy.deepcopy(cls.DEFAULT_CONFIG)
        config.save()
        return config
