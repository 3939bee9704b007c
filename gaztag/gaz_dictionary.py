"""
Dictionary (gazetteer) collaborator for the tagger.

The tagger only needs ``lookup``, ``class_count`` and ``class_name``.
``Gazetteer`` is a plain in-memory implementation loaded from a tab-separated
text file.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

RE_DIGIT = re.compile(r"\d")
RE_SYMBOL = re.compile(r"[^\w\s]")


class NormalizeType:
    """Bit flags controlling dictionary key normalization and matching mode."""

    NONE = 0
    CASE = 1
    NUMBER = 2
    SYMBOL = 4
    TOKEN = 8

    NAMES = {"case": CASE, "number": NUMBER, "symbol": SYMBOL, "token": TOKEN}

    @classmethod
    def from_names(cls, names) -> int:
        """Combine flag names (e.g. ``["case", "token"]``) into a bitmask."""
        value = cls.NONE
        for name in names or ():
            try:
                value |= cls.NAMES[name.lower()]
            except KeyError:
                raise ValueError(f"Unknown normalization type: {name}") from None
        return value


def normalize_key(text: str, normalize_type: int) -> str:
    """
    Canonicalize a dictionary key.

    CASE lowercases, NUMBER maps every digit to "0", and SYMBOL maps every
    character that is neither alphanumeric nor whitespace to "_".
    """
    if normalize_type & NormalizeType.CASE:
        text = text.lower()
    if normalize_type & NormalizeType.NUMBER:
        text = RE_DIGIT.sub("0", text)
    if normalize_type & NormalizeType.SYMBOL:
        text = RE_SYMBOL.sub("_", text)
    return text


class Dictionary:
    """Interface consumed by the tagger."""

    def lookup(self, key: str, normalize_type: int) -> Optional[Tuple[int, ...]]:
        raise NotImplementedError

    def class_count(self) -> int:
        raise NotImplementedError

    def class_name(self, class_id: int) -> str:
        raise NotImplementedError


class Gazetteer(Dictionary):
    """In-memory mapping from normalized surface strings to class ids."""

    def __init__(self, normalize_type: int = NormalizeType.NONE):
        self.normalize_type = normalize_type
        self._entries: Dict[str, List[int]] = {}
        self._class_names: List[str] = []
        self._class_ids: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def class_id(self, name: str) -> int:
        """Return the id of class ``name``, registering it if it is new."""
        if name not in self._class_ids:
            self._class_ids[name] = len(self._class_names)
            self._class_names.append(name)
        return self._class_ids[name]

    def add(self, surface: str, class_names: Iterable[str]):
        key = normalize_key(surface, self.normalize_type)
        ids = self._entries.setdefault(key, [])
        for name in class_names:
            class_id = self.class_id(name)
            if class_id not in ids:
                ids.append(class_id)

    def lookup(self, key: str, normalize_type: int) -> Optional[Tuple[int, ...]]:
        ids = self._entries.get(normalize_key(key, normalize_type))
        if not ids:
            return None
        return tuple(ids)

    def class_count(self) -> int:
        return len(self._class_names)

    def class_name(self, class_id: int) -> str:
        if class_id < 0:
            raise IndexError(f"Unknown class id: {class_id}")
        return self._class_names[class_id]

    @classmethod
    def from_file(cls, path: str, normalize_type: int = NormalizeType.NONE):
        """
        Load a gazetteer from ``surface<TAB>class[<TAB>class...]`` lines.

        Blank lines and lines starting with "#" are skipped.
        """
        gazetteer = cls(normalize_type)
        with open(path, "r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                line = line.rstrip("\r\n")
                if not line.strip() or line.startswith("#"):
                    continue
                fields = line.split("\t")
                class_names = [name for name in fields[1:] if name]
                if not class_names:
                    logger.warning(
                        "Skipping dictionary line %s without a class: %r",
                        line_number,
                        line,
                    )
                    continue
                gazetteer.add(fields[0], class_names)

        logger.info(
            "Loaded %s entries in %s classes from %s",
            len(gazetteer),
            gazetteer.class_count(),
            path,
        )
        return gazetteer
