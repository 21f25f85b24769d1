from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

from .types import Placement

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 6
_repr.maxtuple = 6


def _placement_summary(placement: Placement) -> str:
    loc = placement.location
    dims = placement.dimensions
    return (
        f"Placement({placement.id!r} {placement.category.value} "
        f"at ({loc.x:.6g}, {loc.y:.6g}) {dims.width:.6g}x{dims.height:.6g})"
    )


def _safe_repr(value: Any, *, max_items: int = 4, max_length: int = 400) -> str:
    if isinstance(value, Placement):
        return _placement_summary(value)

    if isinstance(value, np.ndarray):
        size = int(value.size)
        head = f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
        if size == 0:
            return head
        if size <= max_items:
            return f"{head}, values={_repr.repr(value.tolist())}"
        return f"{head}, min={float(value.min()):.6g}, max={float(value.max()):.6g}"

    if isinstance(value, (list, tuple)):
        if value and all(isinstance(item, Placement) for item in value):
            ids = [item.id for item in value[:max_items]]
            more = "" if len(value) <= max_items else ", ..."
            return f"<{len(value)} placements: {', '.join(ids)}{more}>"
        items = [_safe_repr(item) for item in value[:max_items]]
        if len(value) > max_items:
            items.append(f"... ({len(value)} items)")
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        return f"{open_br}{', '.join(items)}{close_br}"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(_safe_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append(
            "kwargs={" + ", ".join(f"{key}={_safe_repr(val)}" for key, val in kwargs.items()) + "}"
        )
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that traces calls at DEBUG level.

    Placements and placement lists are summarised by id so that a drag
    session with a few hundred elements does not flood the log.
    """

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception("Exception in %s", qualname)
                raise
            if log_result:
                logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
            else:
                logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the public functions defined in ``namespace`` with :func:`debug_log_call`.

    Private helpers (leading underscore) are left alone; they run inside the
    hot loops of the public entry points.
    """

    module_name = namespace.get("__name__")
    if not isinstance(module_name, str):
        module_name = None
    logger = logger or logging.getLogger(module_name or __name__)
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name in skip_set or name.startswith("_"):
            continue
        if inspect.isfunction(value) and getattr(value, "__module__", None) == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)


__all__ = ["apply_debug_logging", "debug_log_call"]
