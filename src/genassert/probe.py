"""Filesystem probing for generated artifacts."""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from genassert.config import get_config
from genassert.errors import FixtureParseError


logger = logging.getLogger(__name__)


def exists(path: str | os.PathLike[str]) -> bool:
    """Return True if a file or directory exists at ``path``."""
    return os.path.exists(path)


def read(path: str | os.PathLike[str], as_json: bool = False, encoding: str | None = None) -> Any:
    """Read the full text of ``path``, parsed as JSON when ``as_json`` is set.

    Raises:
    ------
    FileNotFoundError
        If nothing exists at ``path``
    FixtureParseError
        If ``as_json`` is set and the content is not valid JSON
    """
    # newline="" keeps CRLF and lone CR exactly as written.
    with open(path, encoding=encoding or get_config().encoding, newline="") as fh:
        text = fh.read()
    if not as_json:
        return text

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Failed to parse %s as JSON", path, exc_info=True)
        raise FixtureParseError(path, e) from e
