"""
Overlap resolution for the dictionary tagger.

Selects which generated candidates are written as labels.
"""

import logging
from typing import List, Sequence

from .core import NECandidate, OverlapPolicy

logger = logging.getLogger(__name__)


class OverlapResolver:
    """
    Selects candidates according to an overlap policy.

    - tag-longest: leftmost-greedy scan keeping a candidate only when it
      begins after the end of the previously kept one.
    - tag-all: keep every candidate; the label emitter arbitrates conflicts.
    """

    def __init__(self, policy: str = OverlapPolicy.TAG_LONGEST):
        if policy not in OverlapPolicy.ALL:
            raise ValueError(f"Unknown overlap policy: {policy}")
        self.policy = policy

    def resolve(self, candidates: Sequence[NECandidate]) -> List[int]:
        """
        Return indices into ``candidates`` of the selected ones.

        Candidates must already be ordered by ``begin`` (longer first for an
        equal ``begin``); they are not re-sorted.
        """
        tag_all = self.policy == OverlapPolicy.TAG_ALL
        selected = []
        last_end = -1
        for idx, candidate in enumerate(candidates):
            if tag_all or candidate.begin > last_end:
                selected.append(idx)
                last_end = candidate.end

        logger.debug(
            "Overlap resolution (%s): %s -> %s candidates",
            self.policy,
            len(candidates),
            len(selected),
        )
        return selected
