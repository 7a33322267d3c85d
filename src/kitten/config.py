"""Runtime configuration for walkthroughs and async helpers."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class KittenConfig(BaseModel):
    """Settings shared by the walkthroughs.

    Attributes:
        await_timeout: Seconds to wait on an asynchronous result before
            giving up. Keeps async walkthroughs deterministic.
        log_level: Name of the logging level applied by configure_logging.
    """

    model_config = ConfigDict(frozen=True)

    await_timeout: float = Field(default=1.0, gt=0)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LEVELS)}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> KittenConfig:
        """Load settings from KITTEN_* environment variables.

        Unset variables keep their defaults.
        """
        environ = os.environ if environ is None else environ
        values: dict[str, str] = {}
        if "KITTEN_AWAIT_TIMEOUT" in environ:
            values["await_timeout"] = environ["KITTEN_AWAIT_TIMEOUT"]
        if "KITTEN_LOG_LEVEL" in environ:
            values["log_level"] = environ["KITTEN_LOG_LEVEL"]
        return cls.model_validate(values)


def configure_logging(config: KittenConfig) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("kitten").setLevel(config.log_level)
