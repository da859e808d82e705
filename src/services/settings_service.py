"""Service for merging Postman environments into the editor settings file."""

import json
from typing import Any, Dict

from ..configuration.config import Config
from ..exceptions import OutputWriteError
from ..utils.logger import Logger

Environments = Dict[str, Dict[str, Any]]


class SettingsService:
    """Loads, merges and persists the REST Client environment variables."""

    def __init__(self, config: Config):
        """
        Initialize the SettingsService.

        Args:
            config: Configuration instance holding the settings file location and key
        """
        self.config = config
        self.logger = Logger.get_logger(__name__)

    def ensure_settings_file(self) -> None:
        """Create the settings folder and an empty settings document when missing."""
        settings_path = self.config.settings_path
        try:
            if not settings_path.parent.exists():
                self.logger.info("Settings folder does not exist, creating it")
                settings_path.parent.mkdir(parents=True, exist_ok=True)
            if not settings_path.exists():
                self.logger.info("Settings file does not exist, creating it")
                settings_path.write_text(json.dumps({}), encoding="utf-8")
            else:
                self.logger.debug(f"Settings file exists: {settings_path}")
        except OSError as e:
            raise OutputWriteError(str(settings_path), e) from e

    def load_settings(self) -> Dict[str, Any]:
        """
        Load the settings document.

        An unreadable or non-object document is replaced by an empty one.
        """
        settings_path = self.config.settings_path
        try:
            settings = json.loads(settings_path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as exc:
            self.logger.warning(f"⚠️ Invalid settings file {settings_path}: {exc}")
            return {}
        if not isinstance(settings, dict):
            self.logger.warning(f"⚠️ Settings file {settings_path} is not a JSON object, ignoring it")
            return {}
        return settings

    def save_settings(self, settings: Dict[str, Any]) -> None:
        settings_path = self.config.settings_path
        try:
            settings_path.write_text(json.dumps(settings, indent=4), encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(settings_path), e) from e

    @staticmethod
    def merge_environments(settings: Dict[str, Any], environments: Environments, key: str) -> Dict[str, Any]:
        """
        Merge environments into ``settings[key]``, replacing whole entries by name.

        Environments already stored under other names are left untouched.
        """
        merged = dict(settings)
        current = merged.get(key)
        merged[key] = {**current, **environments} if isinstance(current, dict) else dict(environments)
        return merged

    def update_environment_variables(self, environments: Environments) -> Dict[str, Any]:
        """Merge ``environments`` into the settings file and persist it."""
        self.ensure_settings_file()
        settings = self.merge_environments(self.load_settings(), environments, self.config.settings_key)
        self.save_settings(settings)
        self.logger.info(
            f"Updated {self.config.settings_path} with environments: {', '.join(environments) or 'none'}"
        )
        return settings
