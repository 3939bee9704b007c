"""
POS-based span length bounds for longest-match lookup.

Both bounds scan forward from a start row over at most ``max_ne_len`` rows.
"""

from typing import Optional, Sequence

from .core import POS_COL, PosFilter


def _window_end(rows: Sequence[Sequence[str]], i_row: int, max_ne_len: int) -> int:
    return min(i_row + max_ne_len, len(rows))


def find_min_length(
    rows: Sequence[Sequence[str]], i_row: int, pos_filter: PosFilter, max_ne_len: int
) -> Optional[int]:
    """
    Return the offset of the first row carrying a required POS tag.

    A span starting at ``i_row`` must be longer than this offset to include
    that row. Returns None when no required tag occurs in the window, in which
    case no span starting at ``i_row`` is admissible.
    """
    for row in range(i_row, _window_end(rows, i_row, max_ne_len)):
        if pos_filter.is_required(rows[row][POS_COL]):
            return row - i_row
    return None


def find_max_length(
    rows: Sequence[Sequence[str]], i_row: int, pos_filter: PosFilter, max_ne_len: int
) -> int:
    """
    Return the longest span starting at ``i_row`` free of disallowed POS tags.

    The first disallowed row and everything after it is excluded. Without a
    disallowed row the window extent is returned unshortened.
    """
    end = _window_end(rows, i_row, max_ne_len)
    for row in range(i_row, end):
        if pos_filter.is_disallowed(rows[row][POS_COL]):
            return row - i_row
    return end - i_row
