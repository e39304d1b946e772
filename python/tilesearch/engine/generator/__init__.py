from tilesearch.engine.generator.generator import BoardGenerator

__all__ = ["BoardGenerator"]
