"""
Tests for the POS filter expression language and span length bounds.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from gaztag.gaz_parser import parse_pos_filter
from gaztag.matcher import PosFilter, find_max_length, find_min_length
from helpers import make_rows


def test_parse_empty_expression():
    pos_filter = parse_pos_filter("")
    assert pos_filter == PosFilter()
    assert not pos_filter.require_active
    assert not pos_filter.disallow_active


def test_parse_all_term_kinds():
    pos_filter = parse_pos_filter("+NN*, +JJ, -VB*, -IN, -PRP$")
    assert pos_filter.require_prefix == frozenset({"NN"})
    assert pos_filter.require_exact == frozenset({"JJ"})
    assert pos_filter.disallow_prefix == frozenset({"VB"})
    assert pos_filter.disallow_exact == frozenset({"IN", "PRP$"})
    assert pos_filter.require_active
    assert pos_filter.disallow_active


def test_parse_punctuation_tags():
    pos_filter = parse_pos_filter("-., -:")
    assert pos_filter.disallow_exact == frozenset({".", ":"})


@pytest.mark.parametrize("expression", ["NN", "+NN,", "+", "+NN -VB", "+NN,,-VB"])
def test_parse_invalid_expression(expression):
    with pytest.raises(ValueError):
        parse_pos_filter(expression)


def test_prefix_and_exact_matching():
    pos_filter = PosFilter(require_exact=frozenset({"JJ"}), require_prefix=frozenset({"NN"}))
    assert pos_filter.is_required("NNS")
    assert pos_filter.is_required("JJ")
    assert not pos_filter.is_required("JJR")
    assert not pos_filter.is_disallowed("NN")


def test_find_min_length():
    rows = make_rows(["the", "big", "dog", "barks"], ["DT", "JJ", "NN", "VBZ"])
    pos_filter = parse_pos_filter("+NN")
    assert find_min_length(rows, 0, pos_filter, 10) == 2
    assert find_min_length(rows, 2, pos_filter, 10) == 0
    assert find_min_length(rows, 3, pos_filter, 10) is None


def test_find_min_length_limited_by_window():
    rows = make_rows(["the", "big", "dog"], ["DT", "JJ", "NN"])
    assert find_min_length(rows, 0, parse_pos_filter("+NN"), 2) is None


def test_find_max_length():
    rows = make_rows(["the", "big", "dog", "barks"], ["DT", "JJ", "NN", "VBZ"])
    pos_filter = parse_pos_filter("-VB*")
    assert find_max_length(rows, 0, pos_filter, 10) == 3
    assert find_max_length(rows, 3, pos_filter, 10) == 0
    assert find_max_length(rows, 0, pos_filter, 2) == 2


def test_find_max_length_unshortened_at_sentence_end():
    rows = make_rows(["big", "dog"], ["JJ", "NN"])
    assert find_max_length(rows, 1, parse_pos_filter("-VB"), 10) == 1
