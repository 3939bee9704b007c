"""
Candidate generation for the dictionary tagger.

Two strategies are available and one of them is chosen once from the tagger
configuration:

- ExactTokenStrategy looks up each raw token on its own.
- LongestMatchStrategy probes spans starting at each row, longest first,
  inside the window allowed by the POS filters.
"""

import logging
from typing import List, Sequence

from ..gaz_dictionary import Dictionary
from .core import BEG_COL, END_COL, RAW_TOKEN_COL, NECandidate, TaggerConfig
from .pos_filter import find_max_length, find_min_length

logger = logging.getLogger(__name__)


def build_key(rows: Sequence[Sequence[str]], i_row: int, length: int) -> str:
    """
    Concatenate ``length`` raw tokens starting at ``i_row``.

    A single space is inserted between two tokens only when their character
    offsets are not contiguous.
    """
    parts = [rows[i_row][RAW_TOKEN_COL]]
    for idx in range(i_row + 1, i_row + length):
        if rows[idx][BEG_COL] != rows[idx - 1][END_COL]:
            parts.append(" ")
        parts.append(rows[idx][RAW_TOKEN_COL])
    return "".join(parts)


class CandidateStrategy:
    """Base class for candidate generation strategies."""

    def __init__(self, config: TaggerConfig):
        self.config = config

    def generate(
        self, rows: Sequence[Sequence[str]], dictionary: Dictionary
    ) -> List[NECandidate]:
        """
        Generate candidates for every start row of a sentence.

        Candidates come out ordered by ``begin``; for equal ``begin`` longer
        spans come first.
        """
        candidates: List[NECandidate] = []
        for i_row in range(len(rows)):
            candidates.extend(self.candidates_at(rows, i_row, dictionary))
        logger.debug(
            "%s: %s candidates over %s rows",
            type(self).__name__,
            len(candidates),
            len(rows),
        )
        return candidates

    def candidates_at(
        self, rows: Sequence[Sequence[str]], i_row: int, dictionary: Dictionary
    ) -> List[NECandidate]:
        raise NotImplementedError


class ExactTokenStrategy(CandidateStrategy):
    """Match each single raw token against the dictionary."""

    def candidates_at(self, rows, i_row, dictionary):
        classes = dictionary.lookup(
            rows[i_row][RAW_TOKEN_COL], self.config.normalize_type
        )
        if not classes:
            return []
        return [NECandidate(begin=i_row, end=i_row, classes=tuple(classes))]


class LongestMatchStrategy(CandidateStrategy):
    """Match the longest token sequence starting at each row."""

    def span_window(self, rows: Sequence[Sequence[str]], i_row: int):
        """
        Return the admissible (min_len, max_len) for spans starting at ``i_row``.

        Lengths strictly greater than ``min_len`` and not greater than
        ``max_len`` are probed. Returns None when the start row is skipped.
        """
        config = self.config
        pos_filter = config.pos_filter
        min_len = 0
        max_len = config.max_ne_len

        if pos_filter.require_active:
            min_len = find_min_length(rows, i_row, pos_filter, config.max_ne_len)
            if min_len is None:
                return None

        if pos_filter.disallow_active:
            max_len = find_max_length(rows, i_row, pos_filter, config.max_ne_len)
            if max_len == 0:
                return None

        max_len = min(max_len, len(rows) - i_row)

        # The sentence-final period is never part of a match
        if i_row + max_len == len(rows) and rows[-1][RAW_TOKEN_COL] == ".":
            max_len -= 1

        if max_len <= min_len:
            return None
        return min_len, max_len

    def candidates_at(self, rows, i_row, dictionary):
        window = self.span_window(rows, i_row)
        if window is None:
            return []
        min_len, max_len = window

        found = []
        for key_len in range(max_len, min_len, -1):
            key = build_key(rows, i_row, key_len)
            classes = dictionary.lookup(key, self.config.normalize_type)
            if not classes:
                continue
            found.append(
                NECandidate(begin=i_row, end=i_row + key_len - 1, classes=tuple(classes))
            )
            if not self.config.tag_all:
                break
        return found


def select_strategy(config: TaggerConfig) -> CandidateStrategy:
    """Pick the candidate strategy for the configured normalization type."""
    if config.token_mode:
        return ExactTokenStrategy(config)
    return LongestMatchStrategy(config)
