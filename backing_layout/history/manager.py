"""Linear undo/redo history over an opaque state value."""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Generic, Optional, Tuple

from ..config import HistoryOptions, get_history_options
from .model import (
    DEFAULT_ACTION,
    INITIAL_ACTION,
    HistoryEntry,
    HistoryInfo,
    HistoryTimeline,
    S,
)
from .scheduling import Clock, ManualScheduler, ScheduledHandle, Scheduler

logger = logging.getLogger(__name__)


class HistoryManager(Generic[S]):
    """Own one undo/redo timeline.

    The manager never inspects the states it stores. Callers hand in an
    independent snapshot on every commit (a fresh tuple of placements, a
    shallow copy of a dict, ...) so that entries stay valid after the live
    state is mutated.

    The history is strictly linear: committing after an undo discards the
    redo branch for good. All operations are total; navigation outside the
    timeline is a no-op.

    Debounced commits (``options.debounce_ms > 0``) go through ``scheduler``.
    Each new commit cancels the pending one, so at most one deferred commit
    exists at a time and the last value wins. Without an explicit scheduler
    a :class:`ManualScheduler` is used; it never fires on its own, so a
    debounced commit stays pending (and ``state`` keeps the previous value)
    until the host calls ``run_due`` on it, calls :meth:`flush`, or
    navigates. Pass an :class:`AsyncioScheduler` to have commits land
    automatically on an event loop.
    """

    def __init__(
        self,
        initial_state: S,
        options: Optional[HistoryOptions] = None,
        *,
        clock: Optional[Clock] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self.options = options or get_history_options()
        self._clock = clock or time.monotonic
        self._scheduler = scheduler or ManualScheduler(self._clock)
        self._timeline: HistoryTimeline[S] = HistoryTimeline(
            present=HistoryEntry(initial_state, INITIAL_ACTION, None, self._clock())
        )
        self._pending_handle: Optional[ScheduledHandle] = None
        self._pending_entry: Optional[HistoryEntry[S]] = None

    # ------------------------------------------------------------------
    # queries

    @property
    def timeline(self) -> HistoryTimeline[S]:
        return self._timeline

    @property
    def state(self) -> S:
        return self._timeline.present.state

    @property
    def present(self) -> HistoryEntry[S]:
        return self._timeline.present

    @property
    def can_undo(self) -> bool:
        return bool(self._timeline.past)

    @property
    def can_redo(self) -> bool:
        return bool(self._timeline.future)

    @property
    def history_size(self) -> int:
        return len(self._timeline.past)

    @property
    def redo_size(self) -> int:
        return len(self._timeline.future)

    @property
    def has_pending(self) -> bool:
        return self._pending_entry is not None

    def entries(self) -> Tuple[HistoryEntry[S], ...]:
        """All entries oldest first; the present sits at index ``history_size``."""

        tl = self._timeline
        return tl.past + (tl.present,) + tl.future

    def info(self) -> HistoryInfo:
        tl = self._timeline
        undo_entry = tl.past[-1] if tl.past else None
        redo_entry = tl.future[0] if tl.future else None
        return HistoryInfo(
            can_undo=undo_entry is not None,
            can_redo=redo_entry is not None,
            undo_action=undo_entry.action if undo_entry else None,
            redo_action=redo_entry.action if redo_entry else None,
            undo_description=undo_entry.description if undo_entry else None,
            redo_description=redo_entry.description if redo_entry else None,
            history_size=len(tl.past),
            current_action=tl.present.action,
            current_description=tl.present.description,
        )

    # ------------------------------------------------------------------
    # commits

    def commit(
        self,
        state: S,
        action: Optional[str] = None,
        description: Optional[str] = None,
        force_boundary: bool = False,
    ) -> None:
        """Record ``state`` as the new present.

        Consecutive commits with the same ``action`` inside the grouping
        window replace the present entry instead of adding an undo step,
        unless ``force_boundary`` is set.
        """

        entry = HistoryEntry(state, action or DEFAULT_ACTION, description, self._clock())
        self._cancel_pending()

        if self.options.debounce_ms > 0 and not force_boundary:
            self._pending_entry = entry
            self._pending_handle = self._scheduler.schedule(
                self.options.debounce_ms / 1000.0, self._fire_pending
            )
            return

        self._apply(entry, force_boundary)

    def commit_immediate(
        self, state: S, action: Optional[str] = None, description: Optional[str] = None
    ) -> None:
        """Commit without debouncing, always opening a new undo step."""

        self.commit(state, action, description, force_boundary=True)

    def flush(self) -> None:
        """Apply a pending debounced commit right away."""

        if self._pending_entry is None:
            return
        self._cancel_handle()
        self._fire_pending()

    def _fire_pending(self) -> None:
        entry = self._pending_entry
        self._pending_entry = None
        self._pending_handle = None
        if entry is not None:
            self._apply(entry, False)

    def _cancel_handle(self) -> None:
        if self._pending_handle is not None:
            self._pending_handle.cancel()
            self._pending_handle = None

    def _cancel_pending(self) -> None:
        if self._pending_entry is not None:
            logger.debug("Superseding pending %r commit", self._pending_entry.action)
        self._cancel_handle()
        self._pending_entry = None

    def _should_coalesce(self, entry: HistoryEntry[S], force_boundary: bool) -> bool:
        tl = self._timeline
        if force_boundary or not self.options.enable_grouping:
            return False
        if entry.action != tl.present.action or not tl.past or tl.future:
            return False
        elapsed_ms = (self._clock() - tl.present.timestamp) * 1000.0
        return elapsed_ms < self.options.grouping_window_ms

    def _apply(self, entry: HistoryEntry[S], force_boundary: bool) -> None:
        tl = self._timeline
        if self._should_coalesce(entry, force_boundary):
            self._timeline = replace(tl, present=entry)
            logger.debug("Coalesced %r commit into present entry", entry.action)
            return

        past = tl.past + (tl.present,)
        max_size = self.options.max_size
        if max_size <= 0:
            past = ()
        elif len(past) > max_size:
            past = past[-max_size:]
        self._timeline = HistoryTimeline(present=entry, past=past, future=())
        logger.debug("Recorded %r commit (past=%d)", entry.action, len(past))

    # ------------------------------------------------------------------
    # navigation

    def undo(self) -> None:
        self.flush()
        tl = self._timeline
        if not tl.past:
            return
        self._timeline = HistoryTimeline(
            present=tl.past[-1],
            past=tl.past[:-1],
            future=(tl.present,) + tl.future,
        )

    def redo(self) -> None:
        self.flush()
        tl = self._timeline
        if not tl.future:
            return
        self._timeline = HistoryTimeline(
            present=tl.future[0],
            past=tl.past + (tl.present,),
            future=tl.future[1:],
        )

    def jump_to(self, index: int) -> None:
        """Make ``past[index]`` the present, keeping every entry reachable.

        ``index == history_size`` addresses the present and is a no-op, as is
        any index outside ``[0, history_size]``.
        """

        self.flush()
        tl = self._timeline
        if not 0 <= index < len(tl.past):
            return
        self._timeline = HistoryTimeline(
            present=tl.past[index],
            past=tl.past[:index],
            future=tl.past[index + 1 :] + (tl.present,) + tl.future,
        )

    def clear(self) -> None:
        """Forget every entry except the present."""

        self.flush()
        self._timeline = HistoryTimeline(present=self._timeline.present)


__all__ = ["HistoryManager"]
