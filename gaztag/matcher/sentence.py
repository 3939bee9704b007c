"""
Sentence buffer for the dictionary tagger.

Reads one blank-line terminated unit (a tokenized sentence or a block of
comment lines) from a stream into a row/column table, and writes it back.
"""

import logging
from typing import List, Optional, TextIO

from .core import OUTSIDE_LABEL, POS_COL, ContentType, InputFormatError

logger = logging.getLogger(__name__)


class SentenceBuffer:
    """
    Tokenized rows of one sentence, or a passthrough comment block.

    Each row is a list of string fields. Tagging appends label columns to
    every row in place; candidate lists only refer to rows by index.
    """

    def __init__(self):
        self.rows: List[List[str]] = []
        self.content_type = ContentType.UNINITIALIZED
        self.exhausted = False
        self.label_base: Optional[int] = None
        self._stream: Optional[TextIO] = None
        self._line_number = 0
        self._first_line = 1

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: int) -> List[str]:
        return self.rows[index]

    def __iter__(self):
        return iter(self.rows)

    def empty(self) -> bool:
        return not self.rows

    @property
    def is_comment(self) -> bool:
        return self.content_type == ContentType.COMMENT

    @property
    def is_sentence(self) -> bool:
        return self.content_type == ContentType.SENTENCE

    def clear(self):
        self.rows = []
        self.content_type = ContentType.UNINITIALIZED
        self.exhausted = False
        self.label_base = None

    def set_content_type(self, content_type: int):
        """Switch the buffer to ``content_type``; a buffer may not hold both kinds."""
        if self.content_type in (ContentType.UNINITIALIZED, content_type):
            self.content_type = content_type
            return
        raise InputFormatError(
            "Comments and sentences must be separated by a blank line.",
            self._line_number,
        )

    def read(self, stream: TextIO, multidoc_separator: str = "") -> int:
        """
        Read one unit from ``stream`` and return the number of rows read.

        Reading stops at a blank line or at end of stream. Lines starting with
        a non-empty ``multidoc_separator`` are kept verbatim as single-field
        comment rows; other lines are split on tabs.

        Line numbers in errors count from the start of ``stream``; they restart
        when the buffer is handed a different stream.

        Raises:
            InputFormatError: if comment and sentence lines are mixed
        """
        self.clear()
        if stream is not self._stream:
            self._stream = stream
            self._line_number = 0
        self._first_line = self._line_number + 1

        while True:
            line = stream.readline()
            if not line:
                self.exhausted = True
                break
            self._line_number += 1

            line = line.rstrip("\r\n")
            if not line:
                break

            if multidoc_separator and line.startswith(multidoc_separator):
                self.set_content_type(ContentType.COMMENT)
                self.rows.append([line])
                continue

            self.set_content_type(ContentType.SENTENCE)
            self.rows.append(line.split("\t"))

        return len(self.rows)

    def validate(self):
        """Check that every row has the same width and carries a POS column."""
        if not self.rows:
            return
        width = len(self.rows[0])
        if width <= POS_COL:
            raise InputFormatError(
                f"Token rows need at least {POS_COL + 1} columns, got {width}.",
                self._first_line,
            )
        for i, row in enumerate(self.rows):
            if len(row) != width:
                raise InputFormatError(
                    f"Row {i} has {len(row)} columns, expected {width}.",
                    self._first_line + i,
                )

    def add_label_columns(self, count: int) -> int:
        """
        Append ``count`` label columns initialized to "O" to every row.

        Columns are only added once per buffer; later calls return the index
        of the first label column added by the first call.
        """
        if self.label_base is not None:
            return self.label_base
        self.label_base = len(self.rows[0]) if self.rows else 0
        for row in self.rows:
            row.extend([OUTSIDE_LABEL] * count)
        return self.label_base

    def write(self, stream: TextIO):
        """Write rows tab-joined, one per line, followed by a blank line."""
        for row in self.rows:
            stream.write("\t".join(row))
            stream.write("\n")
        stream.write("\n")
