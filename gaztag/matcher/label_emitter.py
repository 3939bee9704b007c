"""
BIO label emission for the dictionary tagger.
"""

import logging
from typing import Sequence

from ..gaz_dictionary import Dictionary
from .core import OUTSIDE_LABEL, NECandidate
from .sentence import SentenceBuffer

logger = logging.getLogger(__name__)


class LabelEmitter:
    """Writes selected candidates into per-class label columns."""

    @staticmethod
    def mark(
        buffer: SentenceBuffer,
        dictionary: Dictionary,
        candidates: Sequence[NECandidate],
        selected: Sequence[int],
    ):
        """
        Append one label column per dictionary class and fill in BIO labels.

        A candidate is skipped for a class when its first row already holds a
        label in that class's column, so the first writer wins.
        """
        base = buffer.add_label_columns(dictionary.class_count())
        rows = buffer.rows
        written = 0

        for idx in selected:
            candidate = candidates[idx]
            for class_id in candidate.classes:
                col = base + class_id
                if rows[candidate.begin][col] != OUTSIDE_LABEL:
                    continue

                name = dictionary.class_name(class_id)
                rows[candidate.begin][col] = "B-" + name
                for pos in range(candidate.begin + 1, candidate.end + 1):
                    rows[pos][col] = "I-" + name
                written += 1

        logger.debug("Labeled %s spans in %s classes", written, dictionary.class_count())
