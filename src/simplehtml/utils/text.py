"""Text processing utilities for simplehtml.

Example:
    >>> from simplehtml.utils.text import repeat_string
    >>> repeat_string("&nbsp;", 3)
    '&nbsp;&nbsp;&nbsp;'
"""

from __future__ import annotations


def repeat_string(string: str, times: int) -> str:
    """Repeat a unit string a number of times.

    Args:
        string: Unit to repeat
        times: Non-negative repeat count

    Returns:
        The unit repeated ``times`` times ("" for 0, the unit itself for 1)

    Raises:
        ValueError: If times is negative

    Examples:
        >>> repeat_string(" ", 0)
        ''
        >>> repeat_string("ab", 1)
        'ab'
        >>> repeat_string("ab", 3)
        'ababab'
    """
    if times < 0:
        raise ValueError(f"repeat count must be non-negative, got {times}")
    if times == 0:
        return ""
    if times == 1:
        return string
    return string * times
