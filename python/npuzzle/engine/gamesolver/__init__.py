from npuzzle.engine.gamesolver.solver import SearchNode, Solver

__all__ = ["SearchNode", "Solver"]
