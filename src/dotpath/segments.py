"""Path tokenization and dot-segment evaluation."""

from typing import List

from .errors import require_path

# First element of a segment stack for absolute paths
ROOT_MARKER = "/"

SEPARATOR = "/"


def is_dot_pattern(segment: str) -> bool:
    """
    Check whether a segment consists of dots only.

    A dot-segment of length n ascends n-1 levels: "." stays, ".." goes up one,
    "..." goes up two and so on. The empty string is trivially a dot pattern.

    Args:
        segment: Segment to check

    Returns:
        True if every character of segment is '.'
    """
    return all(char == "." for char in segment)


def get_path_stack(path: str, evaluate_dots: bool = True) -> List[str]:
    """
    Split a path into its segments.

    Empty tokens (repeated or trailing separators) are dropped. If the path
    starts with '/', ROOT_MARKER is the first element of the result.

    With evaluate_dots, dot-segments remove preceding segments instead of being
    kept. Ascents beyond the start of the path are counted and collapsed into a
    single leading dot-segment, which replaces ROOT_MARKER for absolute input.

    Args:
        path: Path to split
        evaluate_dots: Whether dot-segments are evaluated or kept verbatim

    Returns:
        List of segments, new on every call

    Examples:
        >>> get_path_stack("/foo//bar/")
        ['/', 'foo', 'bar']
        >>> get_path_stack("foo/..../bar")
        ['...', 'bar']
        >>> get_path_stack("/foo/../bar", evaluate_dots=False)
        ['/', 'foo', '..', 'bar']
    """
    require_path(path, "path", "get_path_stack")

    was_absolute = path.startswith(SEPARATOR)
    stack: List[str] = []
    underflow = 0

    for segment in path.split(SEPARATOR):
        if not segment:
            continue
        if not evaluate_dots or not is_dot_pattern(segment):
            stack.append(segment)
            continue
        for _ in range(len(segment) - 1):
            if stack:
                stack.pop()
            else:
                underflow += 1

    if underflow > 0:
        stack.insert(0, "." * (underflow + 1))
    elif was_absolute:
        stack.insert(0, ROOT_MARKER)

    return stack
