"""Process-wide defaults for placement tolerances and history behaviour."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional


@dataclass
class PlacementConfig:
    """Tolerances used by the spatial reasoning helpers (document units)."""

    snap_threshold: float = 10.0
    alignment_limit: Optional[int] = 10
    guide_snap_distance: float = 12.0
    grouping_radius: float = 100.0
    dimension_tolerance: float = 2.0
    pattern_tolerance: float = 5.0
    min_group_size: int = 3
    wall_snap_interval: float = 24.0


@dataclass
class HistoryOptions:
    """Knobs for :class:`backing_layout.history.HistoryManager`."""

    max_size: int = 50
    debounce_ms: float = 0.0
    grouping_window_ms: float = 2000.0
    enable_grouping: bool = True


_PLACEMENT_CONFIG = PlacementConfig()
_HISTORY_OPTIONS = HistoryOptions()


def get_placement_config() -> PlacementConfig:
    return copy.deepcopy(_PLACEMENT_CONFIG)


def set_placement_config(config: PlacementConfig) -> None:
    global _PLACEMENT_CONFIG
    _PLACEMENT_CONFIG = copy.deepcopy(config)


def get_history_options() -> HistoryOptions:
    return copy.deepcopy(_HISTORY_OPTIONS)


def set_history_options(options: HistoryOptions) -> None:
    global _HISTORY_OPTIONS
    _HISTORY_OPTIONS = copy.deepcopy(options)


__all__ = [
    "HistoryOptions",
    "PlacementConfig",
    "get_history_options",
    "get_placement_config",
    "set_history_options",
    "set_placement_config",
]
