"""Adapters that build graphs from domain models."""

from .grid import GridMaze, Juncture, Maze, MazeGraph

__all__ = ["GridMaze", "Juncture", "Maze", "MazeGraph"]
