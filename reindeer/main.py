"""Command-line entry point: read a maze file and print both answers."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Any, List, Optional

import yaml
from dotenv import load_dotenv

from reindeer.errors import SearchError
from reindeer.planner import SearchConfig
from reindeer.solver import solve_report
from reindeer.types import Heading
from reindeer.utils.maps import render_optimal_tiles
from reindeer.utils.maze_map import parse_maze

LOGGER = logging.getLogger("reindeer")
DEFAULT_CONFIG = Path("configs/default.yaml")


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reindeer maze solver")
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=Path("input.txt"),
        help="Maze text file",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to YAML config (defaults to $REINDEER_CONFIG, then configs/default.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Python logging level",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Print the maze with optimal-path tiles marked",
    )
    return parser.parse_args(argv)


def load_config(path: Optional[Path]) -> dict[str, Any]:
    """Load YAML config; a missing default file yields an empty config."""
    if path is None:
        env_path = os.environ.get("REINDEER_CONFIG")
        path = Path(env_path) if env_path else DEFAULT_CONFIG
        if not path.exists() and not env_path:
            return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def build_search_config(cfg: dict[str, Any]) -> SearchConfig:
    search_cfg = cfg.get("search") or {}
    max_expansions = search_cfg.get("max_expansions")
    return SearchConfig(
        max_expansions=int(max_expansions) if max_expansions else None,
    )


def build_start_heading(cfg: dict[str, Any]) -> Heading:
    search_cfg = cfg.get("search") or {}
    return Heading.parse(str(search_cfg.get("start_heading", "EAST")))


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    load_dotenv()
    try:
        cfg = load_config(args.config)
    except (OSError, yaml.YAMLError) as exc:
        logging.basicConfig(level=logging.INFO)
        LOGGER.error("Failed to load config: %s", exc)
        return 1
    level = args.log_level or (cfg.get("logging") or {}).get("level", "INFO")
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO))

    try:
        parsed = parse_maze(args.input.read_text(encoding="utf-8"))
        report = solve_report(
            parsed.maze,
            parsed.start,
            build_start_heading(cfg),
            parsed.goal,
            build_search_config(cfg),
        )
    except (OSError, SearchError) as exc:
        LOGGER.error("Failed to solve %s: %s", args.input, exc)
        return 1

    LOGGER.info(
        "Solved %s: cost=%s tiles=%s expansions=%s",
        args.input,
        report.minimal_cost,
        report.tile_count,
        report.expansions,
    )
    print(report.minimal_cost)
    print(report.tile_count)
    if args.render:
        print(render_optimal_tiles(parsed.maze, report.tiles, parsed.start, parsed.goal))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
