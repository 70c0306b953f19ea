"""dmyparse exception hierarchy.

All dmyparse-specific exceptions inherit from DmyparseError. The public
parse functions never let these escape; they are raised by the value
types and the token helpers and turned into ``None`` at the parse boundary.
"""

from __future__ import annotations


class DmyparseError(Exception):
    """Base exception for all dmyparse errors."""

    pass


class ValidationError(DmyparseError):
    """Invalid component values.

    Raised when a date or time component is out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month (Feb 30)
        - Hour value outside 0-23
    """

    pass


class ParseError(DmyparseError):
    """Failed to split or convert a string token.

    Examples:
        - Too few date parts
        - Year token that is neither 2 nor 4 characters
        - Non-numeric token
    """

    pass


__all__ = [
    "DmyparseError",
    "ValidationError",
    "ParseError",
]
