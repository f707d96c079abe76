from backend.engine.gamesolver.frontier import Frontier
from backend.engine.gamesolver.path import reconstruct_path
from backend.engine.gamesolver.solver import SearchResult, Solver

__all__ = ["Frontier", "SearchResult", "Solver", "reconstruct_path"]
