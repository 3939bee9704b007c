"""Gazetteer-based named-entity tagging for tokenized, POS-tagged sentences."""

__version__ = "0.1.0"
