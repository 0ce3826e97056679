from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

ROOT_DIR = Path(__file__).parent.parent
ENV_PATH = ROOT_DIR / ".env"
ENV_PREFIX = "AO3_SERIES_"


class Settings(BaseSettings):
    """
    Global settings for the AO3 series core

    All settings are loaded from the environment file and can be overridden by environment variables.
    `SeriesCoreClient` and `UnitOfWork` take their defaults from here.

    Example `.env` file:
    ```
    AO3_SERIES_DEBUG=true
    ```

    Attributes:
        ROOT_DIR (Path): Root directory of the project
        ENV_PATH (Path): Path to the environment file. Defaults to ROOT_DIR/.env
        ENV_PREFIX (str): Prefix for environment variables. Defaults to AO3_SERIES_
        DEBUG (bool): Enable debug logging
    """

    model_config = SettingsConfigDict(env_file=ENV_PATH, env_prefix=ENV_PREFIX, extra="ignore")

    ROOT_DIR: Path = ROOT_DIR
    ENV_PATH: Path = ENV_PATH
    ENV_PREFIX: str = ENV_PREFIX

    DEBUG: bool = False


settings = Settings()
