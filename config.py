"""
Engine configuration, loadable from a YAML file.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path


@dataclass(frozen=True)
class EngineConfig:
    # Fold each vertex's zero distance to itself into the global minimum.
    include_self_pairs: bool = False
    # Keep per-source distance and predecessor tables on the result.
    keep_distance_tables: bool = False


def load_config(path: Path) -> EngineConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    section = data.get("engine", {}) or {}
    known = {f.name for f in fields(EngineConfig)}
    unknown = set(section) - known
    if unknown:
        raise ValueError(f"{path}: unknown engine options {sorted(unknown)}")

    return EngineConfig(
        include_self_pairs=bool(section.get("include_self_pairs", False)),
        keep_distance_tables=bool(section.get("keep_distance_tables", False)),
    )
