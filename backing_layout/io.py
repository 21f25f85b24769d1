"""Plain-data conversion of placements."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from .types import BackingCategory, Dimensions, Location, Placement, PlacementStatus

logger = logging.getLogger(__name__)


def placement_from_dict(data: Mapping[str, Any]) -> Placement:
    """Build a :class:`Placement` from a mapping.

    Accepts ``location``/``dimensions`` sub-mappings and the ``backingType``
    spelling used by drawing exports as an alias for ``category``.
    """

    try:
        loc = data["location"]
        dims = data["dimensions"]
        category = data.get("category", data.get("backingType", BackingCategory.TWO_BY_SIX))
        return Placement(
            id=str(data["id"]),
            location=Location(float(loc["x"]), float(loc["y"]), float(loc.get("z", 0.0))),
            dimensions=Dimensions(
                float(dims["width"]), float(dims["height"]), float(dims.get("thickness", 1.5))
            ),
            category=BackingCategory.parse(category),
            orientation=float(data.get("orientation", 0.0)),
            status=PlacementStatus(data.get("status", PlacementStatus.USER_MODIFIED.value)),
            component_id=data.get("component_id", data.get("componentId")),
        )
    except KeyError as exc:
        raise ValueError(f"placement record missing field {exc.args[0]!r}") from exc
    except TypeError as exc:
        raise ValueError(f"malformed placement record: {exc}") from exc


def placement_to_dict(placement: Placement) -> Dict[str, Any]:
    loc = placement.location
    dims = placement.dimensions
    record: Dict[str, Any] = {
        "id": placement.id,
        "location": {"x": loc.x, "y": loc.y, "z": loc.z},
        "dimensions": {"width": dims.width, "height": dims.height, "thickness": dims.thickness},
        "category": placement.category.value,
        "orientation": placement.orientation,
        "status": placement.status.value,
    }
    if placement.component_id is not None:
        record["component_id"] = placement.component_id
    return record


def load_placements(path: Union[str, Path]) -> List[Placement]:
    """Read a JSON list of placement records from ``path``."""

    with open(path, encoding="utf-8") as fin:
        records = json.load(fin)
    if not isinstance(records, list):
        raise ValueError(f"{path}: expected a JSON list of placements")

    placements: List[Placement] = []
    for index, record in enumerate(records):
        try:
            placements.append(placement_from_dict(record))
        except ValueError as exc:
            raise ValueError(f"{path}: placement #{index}: {exc}") from exc
    logger.info("Loaded %d placement(s) from %s", len(placements), path)
    return placements


__all__ = ["load_placements", "placement_from_dict", "placement_to_dict"]
