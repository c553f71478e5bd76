"""
Viewer configuration.

Settings come from environment variables, falling back to the defaults in
folkets.core.constants; command line options override both.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, Field

from folkets.core.constants import (
    DEFAULT_DATABASE,
    DEFAULT_LANGUAGE_CODE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SEARCH_LIMIT,
)
from folkets.core.lexical import Language

ENV_DATABASE = "FOLKETS_DB"
ENV_LANGUAGE = "FOLKETS_LANGUAGE"
ENV_LOG_LEVEL = "FOLKETS_LOG_LEVEL"


class ViewerConfig(BaseModel):
    """Configuration for dictionary lookups."""

    database_path: Path = Path(DEFAULT_DATABASE)
    language_code: str = DEFAULT_LANGUAGE_CODE
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = DEFAULT_LOG_LEVEL
    search_limit: int = Field(DEFAULT_SEARCH_LIMIT, ge=1)

    @property
    def language(self) -> Language:
        return Language.from_language_code(self.language_code)


def load_config(environ: Optional[Mapping[str, str]] = None, **overrides) -> ViewerConfig:
    """
    Build a ViewerConfig from the environment.

    Args:
        environ: Mapping to read instead of os.environ
        **overrides: Explicit values; None values are ignored

    Returns:
        ViewerConfig: The resolved configuration
    """
    env = os.environ if environ is None else environ
    values = {}
    if env.get(ENV_DATABASE):
        values["database_path"] = Path(env[ENV_DATABASE]).expanduser()
    if env.get(ENV_LANGUAGE):
        values["language_code"] = env[ENV_LANGUAGE]
    if env.get(ENV_LOG_LEVEL):
        values["log_level"] = env[ENV_LOG_LEVEL].upper()
    values.update({key: value for key, value in overrides.items() if value is not None})
    return ViewerConfig(**values)
