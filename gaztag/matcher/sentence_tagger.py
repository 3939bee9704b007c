"""
Sentence tagger orchestrating the dictionary tagging pipeline.

For each sentence: generate candidates at every start row, resolve overlaps,
then append BIO label columns, one per dictionary class.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TextIO

from ..gaz_dictionary import Dictionary
from .candidates import select_strategy
from .core import InputFormatError, NECandidate, TaggerConfig
from .label_emitter import LabelEmitter
from .overlap_resolver import OverlapResolver
from .sentence import SentenceBuffer

logger = logging.getLogger(__name__)


@dataclass
class TagResult:
    """Candidates generated for one sentence and the indices selected among them."""

    candidates: List[NECandidate] = field(default_factory=list)
    selected: List[int] = field(default_factory=list)


@dataclass
class TaggingStats:
    """Counters collected while tagging a stream."""

    units: int = 0
    sentences: int = 0
    comments: int = 0
    tokens: int = 0
    candidates: int = 0
    selected: int = 0


class SentenceTagger:
    """
    Appends dictionary-class features to tokenized sentences.

    The configuration is fixed at construction and shared read-only by every
    sentence; buffers and candidate lists belong to a single sentence.
    """

    def __init__(self, config: Optional[TaggerConfig] = None):
        self.config = config or TaggerConfig()
        self.strategy = select_strategy(self.config)
        self.overlap_resolver = OverlapResolver(self.config.overlap_policy)
        self.label_emitter = LabelEmitter()

    def tag_nes(self, buffer: SentenceBuffer, dictionary: Dictionary) -> TagResult:
        """
        Tag one sentence buffer in place.

        Raises:
            InputFormatError: if the rows are ragged or lack a POS column
        """
        if buffer.empty():
            return TagResult()
        buffer.validate()

        candidates = self.strategy.generate(buffer.rows, dictionary)
        selected = self.overlap_resolver.resolve(candidates)
        self.label_emitter.mark(buffer, dictionary, candidates, selected)

        logger.debug(
            "Tagged %s tokens: %s candidates, %s selected",
            len(buffer),
            len(candidates),
            len(selected),
        )
        return TagResult(candidates=candidates, selected=selected)

    def tag_stream(
        self,
        input_stream: TextIO,
        output_stream: TextIO,
        dictionary: Dictionary,
        multidoc_separator: str = "",
        progress_callback: Optional[Callable[[int], None]] = None,
    ) -> TaggingStats:
        """
        Tag every unit of ``input_stream`` and write the result to ``output_stream``.

        Comment units pass through unchanged and an empty unit is echoed as a
        blank line. Processing stops at the first malformed unit, which is not
        written.

        Raises:
            InputFormatError: on the first malformed unit
        """
        stats = TaggingStats()
        buffer = SentenceBuffer()

        while True:
            try:
                count = buffer.read(input_stream, multidoc_separator)
                if count and buffer.is_sentence:
                    result = self.tag_nes(buffer, dictionary)
                    stats.candidates += len(result.candidates)
                    stats.selected += len(result.selected)
            except InputFormatError as e:
                logger.error("Input data format: %s", e)
                raise

            if count == 0:
                if buffer.exhausted:
                    break
                output_stream.write("\n")
            else:
                buffer.write(output_stream)
                if buffer.is_comment:
                    stats.comments += 1
                else:
                    stats.sentences += 1
                    stats.tokens += count

            stats.units += 1
            if progress_callback:
                progress_callback(stats.units)
            if buffer.exhausted:
                break

        logger.info(
            "Tagged %s sentences (%s tokens), %s comment blocks",
            stats.sentences,
            stats.tokens,
            stats.comments,
        )
        return stats
