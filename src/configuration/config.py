from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict


class Envs(Enum):
    DEV = "DEV"
    PROD = "PROD"


DEFAULT_BOUNDARY = "----WebKitFormBoundary7MA4YWxkTrZu0gW"


@dataclass
class Config:
    """Runtime configuration shared by every service."""

    env: Envs = Envs.DEV
    debug: bool = False
    log_level: str = "INFO"

    base_dir: str = "."
    postman_dir: str = "Postman"
    collections_dir: str = "collections"
    environments_dir: str = "environments"
    requests_dir: str = "Requests"

    boundary: str = DEFAULT_BOUNDARY
    file_extension: str = ".http"

    settings_file: str = ".vscode/settings.json"
    settings_key: str = "rest-client.environmentVariables"

    generate_requests: bool = True
    generate_environments: bool = True

    @property
    def collections_path(self) -> Path:
        return Path(self.base_dir) / self.postman_dir / self.collections_dir

    @property
    def environments_path(self) -> Path:
        return Path(self.base_dir) / self.postman_dir / self.environments_dir

    @property
    def requests_path(self) -> Path:
        return Path(self.base_dir) / self.requests_dir

    @property
    def settings_path(self) -> Path:
        return Path(self.base_dir) / self.settings_file

    def update(self, updates: Dict[str, Any]) -> None:
        """
        Update configuration attributes in place.

        Args:
            updates: Mapping of attribute name to new value

        Raises:
            ValueError: If a key is not a known configuration attribute
        """
        known = {f.name for f in fields(self)}
        for key, value in updates.items():
            if key not in known:
                raise ValueError(f"Unknown configuration key: {key}")
            setattr(self, key, value)
