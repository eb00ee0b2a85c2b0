"""
Pathwalk: traverse nested structures with path expressions like ``a.b[0]["c-d"]``.

This package uses a src-layout. Import the package as `pathwalk`.
"""

from importlib.metadata import version

__version__ = version("pathwalk")

from .adapters import (
    AttributeAdapter,
    KeyAdapter,
    MappingAdapter,
    SequenceAdapter,
    default_adapters,
    lookup_key,
)
from .config import PATHWALK_CONFIG, PathwalkConfig
from .errors import GrammarError, PathwalkError, TraversalError
from .grammar import normalize_quotes, validate_path
from .missing import PATH_MISSING
from .pairs import KeyValuePair
from .runtime import configure_logging, get_logger
from .tokenizer import format_path, parse
from .traverse import ParentTraversal, traverse, traverse_by_keys, traverse_to_parent

__all__ = [
    "__version__",
    "PATHWALK_CONFIG",
    "PATH_MISSING",
    "AttributeAdapter",
    "GrammarError",
    "KeyAdapter",
    "KeyValuePair",
    "MappingAdapter",
    "ParentTraversal",
    "PathwalkConfig",
    "PathwalkError",
    "SequenceAdapter",
    "TraversalError",
    "configure_logging",
    "default_adapters",
    "format_path",
    "get_logger",
    "lookup_key",
    "normalize_quotes",
    "parse",
    "traverse",
    "traverse_by_keys",
    "traverse_to_parent",
    "validate_path",
]
