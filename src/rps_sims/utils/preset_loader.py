from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedPreset:
    preset_path: Path
    resolved: Dict[str, Any]
    loaded_files: Tuple[Path, ...]  # includes first, preset itself last


def _deep_merge(base: Any, override: Any) -> Any:
    """
    Merge override into base.

      - dict + dict: recursive merge (so a preset can change only `counts.rock`)
      - anything else: override replaces base
    """
    if isinstance(base, dict) and isinstance(override, dict):
        out = dict(base)
        for k, v in override.items():
            out[k] = _deep_merge(out[k], v) if k in out else v
        return out
    if isinstance(override, list):
        return list(override)
    return override


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping: {path}")
    return data


def load_preset(preset_path: str | Path, _chain: Tuple[Path, ...] = ()) -> LoadedPreset:
    """
    Load an arena preset. A preset may pull in shared settings first:

      include:
        - base.yaml
      speed: 4.0
      counts:
        rock: 25

    Included files are merged in order (their own includes first), then the
    preset's own keys win.
    """
    preset_path = Path(preset_path).expanduser().resolve()
    if preset_path in _chain:
        raise ValueError(f"include cycle: {' -> '.join(p.name for p in (*_chain, preset_path))}")
    preset_data = _load_yaml(preset_path)

    include_list = preset_data.pop("include", None) or []
    if not isinstance(include_list, list):
        raise ValueError(f"'include' must be a list in {preset_path}")

    loaded: List[Path] = []
    merged: Dict[str, Any] = {}
    for rel in include_list:
        if not isinstance(rel, str):
            raise ValueError(f"include entries must be strings, got {type(rel)} in {preset_path}")
        inc_path = (preset_path.parent / rel).expanduser().resolve()
        included = load_preset(inc_path, (*_chain, preset_path))
        merged = _deep_merge(merged, included.resolved)
        loaded.extend(included.loaded_files)

    merged = _deep_merge(merged, preset_data)
    loaded.append(preset_path)
    logger.debug("Loaded preset %s (%d file(s))", preset_path.name, len(loaded))

    return LoadedPreset(
        preset_path=preset_path,
        resolved=merged,
        loaded_files=tuple(loaded),
    )
