import os

from dotenv import load_dotenv

from src.configuration.config import DEFAULT_BOUNDARY, Config, Envs

TRUTHY_VALUES = {"true", "1", "yes"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY_VALUES


class BaseConfigAdapter:
    """Builds a Config from environment variables (optionally loaded from .env)."""

    default_log_level = "INFO"

    def __init__(self):
        self.config = self.get_base_config(self.env())

    @staticmethod
    def env() -> Envs:
        return Envs.DEV

    @classmethod
    def get_base_config(cls, env: Envs) -> Config:
        load_dotenv(override=True)

        debug = _env_flag("DEBUG", False)
        log_level = os.getenv("LOG_LEVEL", "DEBUG" if debug else cls.default_log_level).upper()

        return Config(
            env=env,
            debug=debug,
            log_level=log_level,
            base_dir=os.getenv("BASE_DIR", "."),
            postman_dir=os.getenv("POSTMAN_DIR", "Postman"),
            requests_dir=os.getenv("REQUESTS_DIR", "Requests"),
            boundary=os.getenv("FORM_BOUNDARY", DEFAULT_BOUNDARY),
            settings_file=os.getenv("SETTINGS_FILE", ".vscode/settings.json"),
            settings_key=os.getenv("SETTINGS_KEY", "rest-client.environmentVariables"),
            generate_requests=_env_flag("GENERATE_REQUESTS", True),
            generate_environments=_env_flag("GENERATE_ENVIRONMENTS", True),
        )


class DevConfigAdapter(BaseConfigAdapter):
    default_log_level = "DEBUG"

    @staticmethod
    def env() -> Envs:
        return Envs.DEV


class ProdConfigAdapter(BaseConfigAdapter):
    default_log_level = "INFO"

    @staticmethod
    def env() -> Envs:
        return Envs.PROD
