from npuzzle.engine.gameloader.loader import BoardLoader

__all__ = ["BoardLoader"]
