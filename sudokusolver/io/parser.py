from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..core.grid import CELLS, SIZE, Grid
from ..templates import TEMPLATE_REGISTRY, build_template

log = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}

UNPARSEABLE_MESSAGE = (
    "grid info couldn't be parsed. Try using a template or directly specifying "
    "the grid data (with numbers between commas, like so: '0,6,4,8,0,0,1,0,...')."
)


class GridParseError(ValueError):
    pass


@dataclass
class Puzzle:
    grid: Grid
    max_iterations: int | None = None
    source: str | None = None
    options: Dict[str, Any] = field(default_factory=dict)


def parse_grid_data(text: str) -> Grid:
    """Parse 81 comma-separated digits. Whitespace anywhere is ignored."""
    compact = "".join(text.split())
    tokens = compact.split(",")
    if len(tokens) != CELLS:
        raise GridParseError(f"expected {CELLS} comma-separated digits, got {len(tokens)}")
    for token in tokens:
        if len(token) != 1 or token not in "0123456789":
            raise GridParseError(f"not a digit: {token!r}")
    return Grid([int(t) for t in tokens])


def _grid_from_yaml(value: Any) -> Grid:
    if isinstance(value, str):
        return parse_grid_data(value)
    if not isinstance(value, list):
        raise GridParseError("'grid' must be a list or a comma-separated string")
    if len(value) == SIZE and all(isinstance(row, list) for row in value):
        value = [v for row in value for v in row]
    try:
        return Grid.from_cells(value)
    except ValueError as exc:
        raise GridParseError(str(exc)) from exc


def load_puzzle(path: str | Path) -> Puzzle:
    """Load a puzzle file: YAML with a ``grid`` key, or plain comma data."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")

    if path.suffix.lower() not in YAML_SUFFIXES:
        return Puzzle(grid=parse_grid_data(text), source=str(path))

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GridParseError(f"{path}: {exc}") from exc
    if not isinstance(data, dict) or "grid" not in data:
        raise GridParseError(f"{path}: missing 'grid'")

    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise GridParseError(f"{path}: 'options' must be a mapping")
    options = dict(options)

    max_iterations = options.get("max_iterations", data.get("max_iterations"))
    if max_iterations is not None:
        try:
            max_iterations = int(max_iterations)
        except (TypeError, ValueError) as exc:
            raise GridParseError(f"{path}: 'max_iterations' must be an integer") from exc
        if max_iterations < 1:
            raise GridParseError(f"{path}: 'max_iterations' must be at least 1, got {max_iterations}")

    return Puzzle(
        grid=_grid_from_yaml(data["grid"]),
        max_iterations=max_iterations,
        source=str(path),
        options=options,
    )


def resolve_grid(info: str, rng: Optional[random.Random] = None) -> Puzzle:
    """Turn a template name, a file path or inline data into a puzzle."""
    if info in TEMPLATE_REGISTRY:
        log.info("using template %r", info)
        return Puzzle(grid=build_template(info, rng), source=info)

    path = Path(info)
    if path.is_file():
        log.info("reading grid from %s", path)
        return load_puzzle(path)

    try:
        grid = parse_grid_data(info)
    except GridParseError as exc:
        raise GridParseError(UNPARSEABLE_MESSAGE) from exc
    return Puzzle(grid=grid)
