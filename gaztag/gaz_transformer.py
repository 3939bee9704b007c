"""
Lark transformer turning a parsed POS filter expression into a PosFilter.
"""

from lark import Transformer, v_args

from gaztag.matcher.core import PosFilter


@v_args(inline=True)
class PosFilterTransformer(Transformer):
    """Collects filter terms into the four exact/prefix tag sets."""

    def start(self, *terms):
        sets = {
            ("+", False): set(),
            ("+", True): set(),
            ("-", False): set(),
            ("-", True): set(),
        }
        for sign, tag, is_prefix in terms:
            sets[(sign, is_prefix)].add(tag)
        return PosFilter(
            require_exact=frozenset(sets[("+", False)]),
            require_prefix=frozenset(sets[("+", True)]),
            disallow_exact=frozenset(sets[("-", False)]),
            disallow_prefix=frozenset(sets[("-", True)]),
        )

    def term(self, sign, tag, star=None):
        return str(sign), str(tag), star is not None
