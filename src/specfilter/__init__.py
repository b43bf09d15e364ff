"""
specfilter: declarative, composable input filtering.

Purpose
- Package root. Re-exports the engine, the filterer facade, the alias
  registry and the error types.

Functional requirements
- Must not have side effects at import time (no logging setup, no registry
  construction).
"""

from specfilter.engine import filter_input
from specfilter.errors import (
    ConfigurationError,
    DomainError,
    FilterError,
    FiltererError,
)
from specfilter.filterer import Filterer, FiltererInterface, InvokableFilterer
from specfilter.options import FilterOptions, load_options
from specfilter.registry import AliasRegistry, builtin_aliases, default_registry
from specfilter.response import FilterResponse
from specfilter.spec import FieldRule, FilterStep, compile_specification

__version__ = "1.0.0"

__all__ = [
    "AliasRegistry",
    "ConfigurationError",
    "DomainError",
    "FieldRule",
    "FilterError",
    "FilterOptions",
    "FilterResponse",
    "FilterStep",
    "Filterer",
    "FiltererError",
    "FiltererInterface",
    "InvokableFilterer",
    "__version__",
    "builtin_aliases",
    "compile_specification",
    "default_registry",
    "filter_input",
    "load_options",
]
