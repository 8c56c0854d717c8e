"""
Heuristic table loading.

The seed table ships as JSON next to this module. MYCOID_HEURISTICS_PATH
points the loader at an alternative table. Tables are validated once with
the Heuristic schema and cached as tuples.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import TypeAdapter, ValidationError

from mycoid import config
from mycoid.schemas.heuristic import Heuristic

logger = logging.getLogger(__name__)

SEED_HEURISTICS_PATH = Path(__file__).parent / "seed_heuristics.json"

_HEURISTIC_LIST = TypeAdapter(List[Heuristic])

_cache = {}


class HeuristicTableError(Exception):
    """Raised when a heuristic table cannot be read or fails validation."""
    pass


def load_heuristics(path: Union[str, Path]) -> Tuple[Heuristic, ...]:
    """Read and validate a heuristic table. Always re-reads the file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise HeuristicTableError(f"Cannot read heuristic table {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise HeuristicTableError(f"Heuristic table {path} is not valid JSON: {e}") from e

    try:
        heuristics = _HEURISTIC_LIST.validate_python(raw)
    except ValidationError as e:
        raise HeuristicTableError(f"Heuristic table {path} failed validation: {e}") from e

    ids = [h.heuristic_id for h in heuristics]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise HeuristicTableError(f"Heuristic table {path} has duplicate ids: {duplicates}")

    logger.info(f"Loaded {len(heuristics)} heuristics from {path}")
    return tuple(heuristics)


def get_heuristics(path: Optional[Union[str, Path]] = None) -> Tuple[Heuristic, ...]:
    """Cached heuristic table (explicit path, then MYCOID_HEURISTICS_PATH, then the seed table)."""
    resolved = Path(path or config.HEURISTICS_PATH or SEED_HEURISTICS_PATH)
    key = str(resolved)
    if key not in _cache:
        _cache[key] = load_heuristics(resolved)
    return _cache[key]


def clear_heuristics_cache() -> None:
    """Drop cached tables (for testing/hot-reload)."""
    _cache.clear()
