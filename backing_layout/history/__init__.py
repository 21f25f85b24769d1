"""Undo/redo history shared by every editing action."""

from ..config import HistoryOptions
from .manager import HistoryManager
from .model import HistoryEntry, HistoryInfo, HistoryTimeline, format_action_name
from .scheduling import AsyncioScheduler, ManualScheduler, ScheduledHandle, Scheduler

__all__ = [
    "AsyncioScheduler",
    "HistoryEntry",
    "HistoryInfo",
    "HistoryManager",
    "HistoryOptions",
    "HistoryTimeline",
    "ManualScheduler",
    "ScheduledHandle",
    "Scheduler",
    "format_action_name",
]
