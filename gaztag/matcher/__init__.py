"""
Matcher package - sentence-level dictionary tagging components.

- core: Column layout, configuration, candidate type and errors
- sentence: Sentence buffer reading and writing
- pos_filter: POS-based span length bounds
- candidates: Exact-token and longest-match candidate strategies
- overlap_resolver: Candidate selection policies
- label_emitter: BIO label columns
- sentence_tagger: Per-sentence pipeline and stream driver
"""

from .candidates import (
    CandidateStrategy,
    ExactTokenStrategy,
    LongestMatchStrategy,
    build_key,
    select_strategy,
)
from .core import (
    ContentType,
    InputFormatError,
    NECandidate,
    NormalizeType,
    OverlapPolicy,
    PosFilter,
    TaggerConfig,
)
from .label_emitter import LabelEmitter
from .overlap_resolver import OverlapResolver
from .pos_filter import find_max_length, find_min_length
from .sentence import SentenceBuffer
from .sentence_tagger import SentenceTagger, TaggingStats, TagResult

__all__ = [
    "CandidateStrategy",
    "ContentType",
    "ExactTokenStrategy",
    "InputFormatError",
    "LabelEmitter",
    "LongestMatchStrategy",
    "NECandidate",
    "NormalizeType",
    "OverlapPolicy",
    "OverlapResolver",
    "PosFilter",
    "SentenceBuffer",
    "SentenceTagger",
    "TaggerConfig",
    "TaggingStats",
    "TagResult",
    "build_key",
    "find_max_length",
    "find_min_length",
    "select_strategy",
]
