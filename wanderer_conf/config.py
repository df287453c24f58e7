"""Runtime configuration for the wanderer-conf tooling."""
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Paths and logging options, overridable from ``WANDERER_CONF_*`` variables.

    The managed ``wanderer-conf.env`` is never read as an ``env_file`` source:
    the variables it defines belong to the downstream application.
    """

    TEMPLATE_PATH: Path = Field(
        default=Path("wanderer-conf.env.sample"),
        description="Checked-in sample configuration copied by create_config",
    )
    CONFIG_PATH: Path = Field(
        default=Path("wanderer-conf.env"),
        description="Configuration file created and patched in place",
    )
    LOG_LEVEL: str = Field(default="INFO", description="Root logging level")

    model_config = {
        "env_prefix": "WANDERER_CONF_",
        "case_sensitive": False,
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached instance of the settings."""
    return Settings()
