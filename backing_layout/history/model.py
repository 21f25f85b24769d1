"""Records describing an undo/redo timeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Optional, Tuple, TypeVar

S = TypeVar("S")

INITIAL_ACTION = "initial"
DEFAULT_ACTION = "update"

_ACTION_LABELS = {
    "add": "Add Backing",
    "delete": "Delete Backing",
    "move": "Move Backing",
    "duplicate": "Duplicate Backing",
    "paste": "Paste Backing",
    "align": "Align Backings",
    "distribute": "Distribute Backings",
    "resize": "Resize Backing",
    "rotate": "Rotate Backing",
    "type-change": "Change Type",
    "initial": "Initial State",
}


@dataclass(frozen=True)
class HistoryEntry(Generic[S]):
    state: S
    action: str = DEFAULT_ACTION
    description: Optional[str] = None
    timestamp: float = 0.0


@dataclass(frozen=True)
class HistoryTimeline(Generic[S]):
    """``past`` runs oldest to newest, ``future`` nearest redo to farthest."""

    present: HistoryEntry[S]
    past: Tuple[HistoryEntry[S], ...] = field(default_factory=tuple)
    future: Tuple[HistoryEntry[S], ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.past) + 1 + len(self.future)


@dataclass(frozen=True)
class HistoryInfo:
    """Toolbar-facing summary of a timeline."""

    can_undo: bool
    can_redo: bool
    undo_action: Optional[str]
    redo_action: Optional[str]
    undo_description: Optional[str]
    redo_description: Optional[str]
    history_size: int
    current_action: str
    current_description: Optional[str]


def format_action_name(action: Optional[str]) -> str:
    """Human-readable label for an action tag (``"type-change"`` -> ``"Change Type"``)."""

    if not action:
        return ""
    return _ACTION_LABELS.get(action, action[:1].upper() + action[1:])


__all__ = [
    "DEFAULT_ACTION",
    "INITIAL_ACTION",
    "HistoryEntry",
    "HistoryInfo",
    "HistoryTimeline",
    "format_action_name",
]
