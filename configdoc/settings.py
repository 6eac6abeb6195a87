"""
Runtime settings for configdoc.

Defaults come from the environment (optionally a `.env` file found from the
working directory upwards). Command-line options override them.

    CONFIGDOC_SOURCE_ROOT   Directory the variant's source files are relative to
    CONFIGDOC_VARIANT       Built-in variant used when none is given
    CONFIGDOC_LOG_LEVEL     Logging level name (default: WARNING)
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv, find_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from configdoc.exceptions import ConfigDocError


class Settings(BaseModel):
    """Environment-derived defaults."""
    source_root: Path = Field(default=Path("."), description="Source root directory")
    variant: str = Field(default="config", description="Default documentation variant")
    log_level: str = Field(default="WARNING", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """
        Build settings from CONFIGDOC_* environment variables.

        Raises:
            ConfigDocError: If a variable holds an invalid value
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        values = {}
        if os.getenv("CONFIGDOC_SOURCE_ROOT"):
            values["source_root"] = Path(os.environ["CONFIGDOC_SOURCE_ROOT"])
        if os.getenv("CONFIGDOC_VARIANT"):
            values["variant"] = os.environ["CONFIGDOC_VARIANT"]
        if os.getenv("CONFIGDOC_LOG_LEVEL"):
            values["log_level"] = os.environ["CONFIGDOC_LOG_LEVEL"]
        try:
            return cls(**values)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ConfigDocError(f"Invalid settings: {problems}") from e

    def configure_logging(self, verbose: bool = False) -> None:
        """Set up root logging for command-line use."""
        level = logging.DEBUG if verbose else getattr(logging, self.log_level)
        logging.basicConfig(level=level, format='%(message)s')
