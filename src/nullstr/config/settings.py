"""Process-wide logging settings for nullstr.

Priority chain (highest to lowest):
  1. Init kwargs: values passed by the embedding application
  2. Env vars: ``NULLSTR_*`` prefix
  3. Code defaults

Only logging reads these. Decoding behaviour is controlled by explicit
arguments and never by the environment.
"""

from __future__ import annotations

import functools

from pydantic_settings import BaseSettings


class NullStrSettings(BaseSettings):
    """Logging settings for the ``nullstr`` logger.

    Attributes:
        verbose: Enable DEBUG-level output for the ``nullstr`` logger.
        log_json: Render log records as JSON lines.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "NULLSTR_",
    }

    verbose: bool = False
    log_json: bool = False


@functools.cache
def get_settings() -> NullStrSettings:
    """Return the cached settings, reading the environment on first use."""
    return NullStrSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
