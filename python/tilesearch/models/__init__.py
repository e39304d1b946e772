from tilesearch.models.board import EXPANSION_ORDER, BoardState, Direction
from tilesearch.models.loader import BoardFormatError, load_board, parse_board
from tilesearch.models.node import SearchNode, Trace

__all__ = [
    "EXPANSION_ORDER",
    "BoardFormatError",
    "BoardState",
    "Direction",
    "SearchNode",
    "Trace",
    "load_board",
    "parse_board",
]
