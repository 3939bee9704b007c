"""
Tests for reading and writing sentence buffers.
"""

import io
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from gaztag.matcher import ContentType, InputFormatError, SentenceBuffer


def test_read_single_sentence():
    stream = io.StringIO("0\t3\tNew\t-\tNNP\n4\t8\tYork\t-\tNNP\n\n")
    buffer = SentenceBuffer()
    assert buffer.read(stream) == 2
    assert buffer.rows[0] == ["0", "3", "New", "-", "NNP"]
    assert buffer.rows[1][2] == "York"
    assert buffer.content_type == ContentType.SENTENCE
    assert not buffer.exhausted


def test_read_consecutive_units_and_eof():
    stream = io.StringIO("0\t1\ta\t-\tDT\n\n0\t1\tb\t-\tDT\n1\t2\tc\t-\tDT\n")
    buffer = SentenceBuffer()
    assert buffer.read(stream) == 1
    assert buffer.read(stream) == 2
    assert buffer.exhausted
    assert buffer.read(stream) == 0
    assert buffer.exhausted


def test_read_empty_unit_is_not_eof():
    stream = io.StringIO("\n0\t1\ta\t-\tDT\n")
    buffer = SentenceBuffer()
    assert buffer.read(stream) == 0
    assert not buffer.exhausted
    assert buffer.read(stream) == 1


def test_read_strips_crlf():
    stream = io.StringIO("0\t1\ta\t-\tDT\r\n\r\n")
    buffer = SentenceBuffer()
    assert buffer.read(stream) == 1
    assert buffer.rows[0][-1] == "DT"


def test_read_comment_block():
    stream = io.StringIO("###DOC doc1\n###DOC extra\n\n")
    buffer = SentenceBuffer()
    assert buffer.read(stream, "###") == 2
    assert buffer.is_comment
    assert buffer.rows == [["###DOC doc1"], ["###DOC extra"]]


def test_separator_ignored_when_empty():
    stream = io.StringIO("###DOC\tx\n\n")
    buffer = SentenceBuffer()
    buffer.read(stream)
    assert buffer.is_sentence
    assert buffer.rows == [["###DOC", "x"]]


@pytest.mark.parametrize(
    "text",
    [
        "###DOC\n0\t1\ta\t-\tDT\n\n",
        "0\t1\ta\t-\tDT\n###DOC\n\n",
    ],
)
def test_mixed_comment_and_sentence_is_fatal(text):
    buffer = SentenceBuffer()
    with pytest.raises(InputFormatError) as exc_info:
        buffer.read(io.StringIO(text), "###")
    assert exc_info.value.line_number == 2


def test_read_clears_previous_content():
    buffer = SentenceBuffer()
    buffer.read(io.StringIO("###DOC\n\n0\t1\ta\t-\tDT\n\n"), "###")
    buffer.add_label_columns(1)
    buffer.read(io.StringIO("0\t1\tb\t-\tDT\n\n"), "###")
    assert buffer.rows == [["0", "1", "b", "-", "DT"]]
    assert buffer.label_base is None


def test_validate_rejects_ragged_rows():
    buffer = SentenceBuffer()
    buffer.read(io.StringIO("0\t1\ta\t-\tDT\n2\t3\tb\t-\tDT\textra\n\n"))
    with pytest.raises(InputFormatError) as exc_info:
        buffer.validate()
    assert exc_info.value.line_number == 2
    assert str(exc_info.value).startswith("line 2: Row 1")


def test_validate_reports_line_within_later_unit():
    stream = io.StringIO("0\t1\ta\t-\tDT\n\n0\t1\tb\t-\tDT\n2\t3\tc\t-\tDT\n4\t5\td\n\n")
    buffer = SentenceBuffer()
    buffer.read(stream)
    buffer.read(stream)
    with pytest.raises(InputFormatError) as exc_info:
        buffer.validate()
    assert exc_info.value.line_number == 5


def test_validate_rejects_missing_pos_column():
    buffer = SentenceBuffer()
    buffer.read(io.StringIO("0\t1\ta\n\n"))
    with pytest.raises(InputFormatError) as exc_info:
        buffer.validate()
    assert exc_info.value.line_number == 1


def test_line_numbers_restart_on_new_stream():
    buffer = SentenceBuffer()
    buffer.read(io.StringIO("0\t1\ta\t-\tDT\n1\t2\tb\t-\tDT\n\n"), "###")
    with pytest.raises(InputFormatError) as exc_info:
        buffer.read(io.StringIO("###DOC\n0\t1\ta\t-\tDT\n\n"), "###")
    assert exc_info.value.line_number == 2


def test_add_label_columns_once():
    buffer = SentenceBuffer()
    buffer.read(io.StringIO("0\t1\ta\t-\tDT\n2\t3\tb\t-\tNN\n\n"))
    assert buffer.add_label_columns(2) == 5
    assert buffer.add_label_columns(2) == 5
    assert all(row[5:] == ["O", "O"] for row in buffer)


def test_write():
    buffer = SentenceBuffer()
    buffer.read(io.StringIO("0\t1\ta\t-\tDT\n2\t3\tb\t-\tNN\n\n"))
    out = io.StringIO()
    buffer.write(out)
    assert out.getvalue() == "0\t1\ta\t-\tDT\n2\t3\tb\t-\tNN\n\n"
