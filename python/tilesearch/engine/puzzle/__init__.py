from tilesearch.engine.puzzle.puzzle import Puzzle

__all__ = ["Puzzle"]
