"""Width-constrained selection between full and abbreviated names.

Month and day names come in a full form (September) and an abbreviation
(Sep). Callers request a width window; this module picks the form that fits
and pads or truncates it when needed.

Python 3.13+. Zero external dependencies.
"""

from spellout.constants import UNBOUNDED_WIDTH

__all__ = [
    "is_bounded",
    "pad_or_truncate",
    "select_by_width",
]


def is_bounded(max_width: int | None) -> bool:
    """True if max_width is a finite limit (None and UNBOUNDED_WIDTH are not)."""
    return max_width is not None and max_width < UNBOUNDED_WIDTH


def pad_or_truncate(text: str, min_width: int, max_width: int | None) -> str:
    """Fit text into a width window.

    Truncation to a finite max_width happens first; then the text is
    right-padded with spaces up to min_width. Callers must not pass
    min_width > max_width.

    Example:
        >>> pad_or_truncate("Sep", 5, 5)
        'Sep  '
        >>> pad_or_truncate("September", 0, 4)
        'Sept'
    """
    if is_bounded(max_width) and len(text) > max_width:
        text = text[:max_width]
    return text.ljust(min_width)


def select_by_width(full: str, abbrev: str, min_width: int, max_width: int | None) -> str:
    """Choose between a full name and its abbreviation for a width window.

    1. A finite max_width shorter than the full name selects the
       abbreviation, padded or truncated to fit.
    2. An exact width (min_width == max_width > 0) selects the form of that
       length, abbreviation first; failing that, the form whose length is
       closer, with ties going to the full name. The chosen form is padded
       (abbreviation: also truncated) to the exact width.
    3. Otherwise the full name is returned unmodified.

    Args:
        full: Full name (e.g., "Wednesday")
        abbrev: Abbreviated name (e.g., "Wed")
        min_width: Minimum width
        max_width: Maximum width; None or UNBOUNDED_WIDTH for no limit

    Returns:
        Selected name

    Example:
        >>> select_by_width("January", "Jan", 3, 3)
        'Jan'
        >>> select_by_width("January", "Jan", 0, 5)
        'Jan'
        >>> select_by_width("May", "May", 5, 5)
        'May  '
    """
    if is_bounded(max_width) and len(full) > max_width:
        return pad_or_truncate(abbrev, min_width, max_width)

    if min_width > 0 and min_width == max_width:
        if len(abbrev) == min_width:
            return abbrev
        if len(full) == min_width:
            return full
        if abs(len(abbrev) - min_width) < abs(len(full) - min_width):
            return pad_or_truncate(abbrev, min_width, max_width)
        # Full name is shorter than the width here (longer was handled above)
        return full.ljust(min_width)

    return full
