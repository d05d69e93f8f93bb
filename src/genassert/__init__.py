"""genassert - assertions for testing code generators."""

from .assertions import AssertionMetadata, AssertionResult
from .config import GenassertConfig, config_scope, get_config, load_config, set_config, set_discovery_root
from .context import collect_results
from .errors import AssertionFailedError, FixtureParseError
from .facade import (
    assert_equals_file_content,
    assert_file,
    assert_file_content,
    assert_implement,
    assert_JSON_file_content,
    assert_json_file_content,
    assert_no_file,
    assert_no_file_content,
    assert_no_JSON_file_content,
    assert_no_json_file_content,
    assert_no_object_content,
    assert_not_implement,
    assert_object_content,
    assert_text_equal,
)
from .primitives import *  # noqa: F403
from .primitives import __all__ as _primitives_all
from .version import __version__


__all__ = [
    # Generated files
    "assert_file",
    "assert_no_file",
    "assert_file_content",
    "assert_no_file_content",
    "assert_equals_file_content",
    "assert_text_equal",
    "assert_json_file_content",
    "assert_JSON_file_content",
    "assert_no_json_file_content",
    "assert_no_JSON_file_content",
    # Objects
    "assert_implement",
    "assert_not_implement",
    "assert_object_content",
    "assert_no_object_content",
    # Results and errors
    "AssertionResult",
    "AssertionMetadata",
    "AssertionFailedError",
    "FixtureParseError",
    "collect_results",
    # Configuration
    "GenassertConfig",
    "load_config",
    "get_config",
    "set_config",
    "config_scope",
    "set_discovery_root",
    "__version__",
    # Standard primitives
    *_primitives_all,
]
