from .types import (
    AlignmentGuide,
    AlignmentSuggestion,
    BackingCategory,
    Bounds,
    Collision,
    Dimensions,
    DocumentBounds,
    GroupSuggestion,
    Location,
    Placement,
    PlacementStatus,
    Point,
    SnapResult,
    Spacing,
    Viewport,
    WallSegment,
)
from .config import (
    HistoryOptions,
    PlacementConfig,
    get_history_options,
    get_placement_config,
    set_history_options,
    set_placement_config,
)
from .coordinates import CoordinateMapper, GridLines
from .spatial import (
    alignment_guides,
    check_collisions,
    collision_pairs,
    distribute_along_segment,
    optimal_spacing,
    segment_snap_points,
    snap_nearby,
    snap_to_walls,
    suggest_alignment,
    suggest_grouping,
)
from .history import (
    AsyncioScheduler,
    HistoryEntry,
    HistoryInfo,
    HistoryManager,
    HistoryTimeline,
    ManualScheduler,
    format_action_name,
)
from .io import load_placements, placement_from_dict, placement_to_dict

__all__ = [
    'AlignmentGuide',
    'AlignmentSuggestion',
    'AsyncioScheduler',
    'BackingCategory',
    'Bounds',
    'Collision',
    'CoordinateMapper',
    'Dimensions',
    'DocumentBounds',
    'GridLines',
    'GroupSuggestion',
    'HistoryEntry',
    'HistoryInfo',
    'HistoryManager',
    'HistoryOptions',
    'HistoryTimeline',
    'Location',
    'ManualScheduler',
    'Placement',
    'PlacementConfig',
    'PlacementStatus',
    'Point',
    'SnapResult',
    'Spacing',
    'Viewport',
    'WallSegment',
    'alignment_guides',
    'check_collisions',
    'collision_pairs',
    'distribute_along_segment',
    'format_action_name',
    'get_history_options',
    'get_placement_config',
    'load_placements',
    'optimal_spacing',
    'placement_from_dict',
    'placement_to_dict',
    'segment_snap_points',
    'set_history_options',
    'set_placement_config',
    'snap_nearby',
    'snap_to_walls',
    'suggest_alignment',
    'suggest_grouping',
]
