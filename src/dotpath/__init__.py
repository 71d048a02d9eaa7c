"""String-only resolution and normalization of '/'-separated paths."""

from .errors import DotPathError, InvalidArgumentError
from .segments import ROOT_MARKER, is_dot_pattern, get_path_stack
from .render import get_path_stack_string
from .normalizer import (
    resolve_path, evaluate_path, get_absolute_path,
    get_parent_path, get_compatible_path,
)
from .config import ConfigLoader
from .schema import DotPathConfig, PathsConfig
from .logging_config import LoggingConfig
from .logging import setup_logging, get_logger, LogContext

__version__ = "0.1.0"

__all__ = [
    'DotPathError',
    'InvalidArgumentError',
    'ROOT_MARKER',
    'is_dot_pattern',
    'get_path_stack',
    'get_path_stack_string',
    'resolve_path',
    'evaluate_path',
    'get_absolute_path',
    'get_parent_path',
    'get_compatible_path',
    'ConfigLoader',
    'DotPathConfig',
    'PathsConfig',
    'LoggingConfig',
    'setup_logging',
    'get_logger',
    'LogContext',
]
