"""Rendering of segment stacks back into path strings."""

from typing import Sequence

from .segments import ROOT_MARKER, SEPARATOR


def get_path_stack_string(stack: Sequence[str]) -> str:
    """
    Join a segment stack into a path string.

    The stack is only read, so it can be rendered again afterwards.

    Args:
        stack: Segments as returned by get_path_stack

    Returns:
        "/" for a stack holding only ROOT_MARKER, "" for an empty stack,
        otherwise the segments joined by '/', with a leading '/' if the
        first element is ROOT_MARKER

    Examples:
        >>> get_path_stack_string(['/', 'foo', 'bar'])
        '/foo/bar'
        >>> get_path_stack_string(['..', 'foo'])
        '../foo'
    """
    if not stack:
        return ""

    first = stack[0]
    if first == ROOT_MARKER:
        if len(stack) == 1:
            return ROOT_MARKER
        parts = [""]
    else:
        parts = [first]

    for index in range(1, len(stack)):
        parts.append(stack[index])

    return SEPARATOR.join(parts)
