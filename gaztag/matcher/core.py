"""
Core data structures for the dictionary tagger.

Contains the column layout of token rows, the overlap policy and content flags,
the immutable tagger configuration and the NE candidate type shared by every
stage of the matcher.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

from ..gaz_dictionary import NormalizeType

# Predefined column layout of a token row.
BEG_COL = 0
END_COL = 1
RAW_TOKEN_COL = 2
POS_COL = 4

DEFAULT_MAX_NE_LEN = 10

OUTSIDE_LABEL = "O"


class OverlapPolicy:
    """How overlapping candidates are selected."""

    TAG_LONGEST = "tag-longest"
    TAG_ALL = "tag-all"

    ALL = (TAG_LONGEST, TAG_ALL)


class ContentType:
    """Coarse content state of a sentence buffer."""

    UNINITIALIZED = 0
    COMMENT = 1
    SENTENCE = 2


class InputFormatError(ValueError):
    """Raised when the tokenized input cannot be tagged safely."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


@dataclass(frozen=True)
class NECandidate:
    """A dictionary entry matched onto the token span [begin, end]."""

    begin: int
    end: int
    classes: Tuple[int, ...]
    similarity: float = 1.0

    @property
    def length(self) -> int:
        return self.end - self.begin + 1


@dataclass(frozen=True)
class PosFilter:
    """
    Candidate sequence POS tag filter.

    Only sequences containing a POS tag in ``require_exact`` (or starting with
    one of ``require_prefix``) and not containing a POS tag in
    ``disallow_exact`` (or starting with one of ``disallow_prefix``) are
    looked up. With both sides empty the filter is inactive.
    """

    require_exact: FrozenSet[str] = field(default_factory=frozenset)
    require_prefix: FrozenSet[str] = field(default_factory=frozenset)
    disallow_exact: FrozenSet[str] = field(default_factory=frozenset)
    disallow_prefix: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def require_active(self) -> bool:
        return bool(self.require_exact or self.require_prefix)

    @property
    def disallow_active(self) -> bool:
        return bool(self.disallow_exact or self.disallow_prefix)

    def is_required(self, pos: str) -> bool:
        if pos in self.require_exact:
            return True
        return any(pos.startswith(prefix) for prefix in self.require_prefix)

    def is_disallowed(self, pos: str) -> bool:
        if pos in self.disallow_exact:
            return True
        return any(pos.startswith(prefix) for prefix in self.disallow_prefix)


@dataclass(frozen=True)
class TaggerConfig:
    """Process-wide tagging configuration, fixed before the first sentence."""

    normalize_type: int = NormalizeType.NONE
    max_ne_len: int = DEFAULT_MAX_NE_LEN
    overlap_policy: str = OverlapPolicy.TAG_LONGEST
    pos_filter: PosFilter = field(default_factory=PosFilter)

    def __post_init__(self):
        if self.overlap_policy not in OverlapPolicy.ALL:
            raise ValueError(
                f"Unknown overlap policy: {self.overlap_policy}. "
                f"Expected one of {', '.join(OverlapPolicy.ALL)}."
            )
        if self.max_ne_len < 1:
            raise ValueError(f"max_ne_len must be positive, got {self.max_ne_len}")

    @property
    def token_mode(self) -> bool:
        return (self.normalize_type & NormalizeType.TOKEN) != 0

    @property
    def tag_all(self) -> bool:
        return self.overlap_policy == OverlapPolicy.TAG_ALL
