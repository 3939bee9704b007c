from pathlib import Path

from lark import Lark
from lark.exceptions import UnexpectedInput

from gaztag.gaz_transformer import PosFilterTransformer
from gaztag.matcher.core import PosFilter

GRAMMAR_PATH = Path(__file__).parent / "pos_filter.lark"
with open(GRAMMAR_PATH, "r", encoding="utf-8") as f:
    POS_FILTER_GRAMMAR = f.read()

pos_filter_parser = Lark(POS_FILTER_GRAMMAR, start="start", parser="lalr")


def parse_pos_filter(expression: str) -> PosFilter:
    """
    Parse a POS filter expression such as ``"+NN*, +JJ, -VB*"``.

    Raises:
        ValueError: if the expression is malformed
    """
    if not expression or not expression.strip():
        return PosFilter()
    try:
        tree = pos_filter_parser.parse(expression)
    except UnexpectedInput as e:
        raise ValueError(f"Invalid POS filter expression {expression!r}: {e}") from e
    return PosFilterTransformer().transform(tree)
