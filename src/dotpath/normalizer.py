"""Resolution and normalization of '/'-separated path strings.

Besides the usual "." and ".." segments, any segment made of dots only is
understood as a shorthand for several ascents: "..." is "../..", "...." is
"../../.." and so on.
"""

import logging
from typing import Optional

from .errors import InvalidArgumentError, require_path
from .render import get_path_stack_string
from .segments import SEPARATOR, get_path_stack, is_dot_pattern

logger = logging.getLogger(__name__)

PARENT_SEGMENT = ".."


def resolve_path(base_path: str, path: str) -> str:
    """
    Resolve path against base_path if path is relative.

    A relative path is appended to base_path, an absolute path is returned
    unchanged. An empty path counts as relative. Dots are NOT evaluated;
    use evaluate_path on the result for that.

    Args:
        base_path: Base used when path is relative
        path: Path to resolve

    Returns:
        The resolved path

    Raises:
        InvalidArgumentError: If base_path or path is None

    Examples:
        >>> resolve_path("foo", "/bar")
        '/bar'
        >>> resolve_path("/foo", "bar")
        '/foo/bar'
        >>> resolve_path("/foo", "../bar")
        '/foo/../bar'
    """
    try:
        require_path(base_path, "base_path", "resolve_path")
        require_path(path, "path", "resolve_path")
    except InvalidArgumentError as e:
        logger.debug(f"Invalid argument: {{'operation': 'resolve_path', 'parameter': {e.context['parameter']!r}}}", exc_info=True)
        raise

    if not base_path:
        return path
    if not path:
        return base_path
    if path.startswith(SEPARATOR):
        return path
    if base_path.endswith(SEPARATOR):
        return base_path + path
    return base_path + SEPARATOR + path


def evaluate_path(path: str) -> str:
    """
    Evaluate the dot-segments contained in path.

    The result holds at most one dot-segment, as its first element, for
    ascents that went beyond the start of the path. Such an underflow also
    drops the leading '/' of an absolute path.

    Examples:
        >>> evaluate_path("/foo/bar/../foobar")
        '/foo/foobar'
        >>> evaluate_path("/foo/bar/..../foobar")
        '../foobar'
    """
    return get_path_stack_string(get_path_stack(path, evaluate_dots=True))


def get_absolute_path(base_path: str, path: str) -> Optional[str]:
    """
    Return the absolute path for path resolved against base_path.

    Args:
        base_path: Base used when path is relative
        path: Path to resolve

    Returns:
        The evaluated absolute path, or None if the result is not absolute
        because base_path was relative or the ascents went past the root

    Raises:
        InvalidArgumentError: If base_path or path is None

    Examples:
        >>> get_absolute_path("/foo/bar", "../foobar")
        '/foo/foobar'
        >>> get_absolute_path("/foo/bar", "..../foobar") is None
        True
        >>> get_absolute_path("bar", "foobar") is None
        True
    """
    result = evaluate_path(resolve_path(base_path, path))
    if not result.startswith(SEPARATOR):
        logger.debug(f"Evaluated path is not absolute: {{'result': {result!r}, 'base_path': {base_path!r}, 'path': {path!r}}}")
        return None
    return result


def get_parent_path(path: str) -> str:
    """Return the evaluated parent of path, i.e. evaluate_path(resolve_path(path, ".."))."""
    return evaluate_path(resolve_path(path, PARENT_SEGMENT))


def get_compatible_path(path: str) -> str:
    """
    Evaluate path and expand a leading dot-segment into repeated "..".

    The result only uses "." and ".." style segments, e.g. "..../foo"
    becomes "../../../foo".
    """
    stack = get_path_stack(path, evaluate_dots=True)
    if not stack:
        return ""

    first = stack[0]
    if is_dot_pattern(first):
        stack[:1] = [PARENT_SEGMENT] * (len(first) - 1)

    return get_path_stack_string(stack)
