"""Maze I/O helpers."""

from .maps import render_optimal_tiles
from .maze_map import MazeMap, ParsedMaze, parse_maze, passable_mask

__all__ = [
    "MazeMap",
    "ParsedMaze",
    "parse_maze",
    "passable_mask",
    "render_optimal_tiles",
]
