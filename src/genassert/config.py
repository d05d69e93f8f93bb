"""Configuration loading for genassert.

Settings live in the ``[tool.genassert]`` table of the nearest
``pyproject.toml``:

    [tool.genassert]
    encoding = "utf-8"
    max_body_chars = 2000
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)

PYPROJECT_NAME = "pyproject.toml"
TOOL_TABLE = "genassert"


class GenassertConfig(BaseModel):
    """Settings applied by every assertion.

    Attributes:
    ----------
    encoding : str
        Text encoding used when reading files
    max_body_chars : int | None
        Truncate file bodies embedded in failure messages; None keeps the full body
    repr_max_len : int
        Truncation length for actual/expected values in result reprs
    """

    encoding: str = "utf-8"
    max_body_chars: int | None = Field(default=None, ge=0)
    repr_max_len: int = Field(default=50, ge=4)


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT_NAME
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> GenassertConfig:
    """Load configuration from the nearest pyproject.toml, falling back to defaults."""
    pyproject = find_pyproject(start)
    if pyproject is None:
        logger.debug("No %s found, using default configuration", PYPROJECT_NAME)
        return GenassertConfig()

    with pyproject.open("rb") as fh:
        data = tomllib.load(fh)

    table: dict[str, Any] = data.get("tool", {}).get(TOOL_TABLE, {})
    known = GenassertConfig.model_fields.keys()
    for key in table.keys() - known:
        logger.warning("Ignoring unknown [tool.%s] key %r in %s", TOOL_TABLE, key, pyproject)

    logger.debug("Loaded [tool.%s] from %s", TOOL_TABLE, pyproject)
    return GenassertConfig.model_validate({k: v for k, v in table.items() if k in known})


# Lazy discovery starts at the working directory at import time, not at the
# cwd of the first assertion.
_discovery_root: Path = Path.cwd()

ACTIVE_CONFIG: ContextVar[GenassertConfig | None] = ContextVar("active_config", default=None)


def set_discovery_root(root: Path) -> None:
    """Set where lazy configuration discovery starts and drop the loaded config."""
    global _discovery_root
    _discovery_root = root
    ACTIVE_CONFIG.set(None)


def get_config() -> GenassertConfig:
    """Return the active configuration, loading it from the discovery root on first use."""
    config = ACTIVE_CONFIG.get()
    if config is None:
        config = load_config(_discovery_root)
        ACTIVE_CONFIG.set(config)
    return config


def set_config(config: GenassertConfig | None) -> None:
    """Replace the active configuration. ``None`` forces a reload on next use."""
    ACTIVE_CONFIG.set(config)


@contextmanager
def config_scope(**overrides: Any) -> Iterator[GenassertConfig]:
    """Temporarily apply configuration overrides."""
    scoped = GenassertConfig.model_validate({**get_config().model_dump(), **overrides})
    token = ACTIVE_CONFIG.set(scoped)
    try:
        yield scoped
    finally:
        ACTIVE_CONFIG.reset(token)
