"""Core records shared by the coordinate, spatial and history components."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Literal, Optional, Tuple

SnapKind = Literal["edge", "center", "corner", "wall"]
AlignmentKind = Literal["left", "right", "top", "bottom", "center_h", "center_v"]
GuideOrientation = Literal["horizontal", "vertical"]
PatternKind = Literal["linear", "grid", "cluster"]
WallKind = Literal["interior", "exterior", "partition"]


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Location:
    """Top-left corner of a placement plus its height above finished floor."""

    x: float
    y: float
    z: float = 0.0

    def to_point(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class Dimensions:
    width: float
    height: float
    thickness: float

    def __post_init__(self) -> None:
        for name in ("width", "height", "thickness"):
            value = float(getattr(self, name))
            if not value > 0.0:
                raise ValueError(f"dimension {name} must be positive, got {value!r}")
            object.__setattr__(self, name, value)


class BackingCategory(str, Enum):
    """Lumber or plate stock used for a backing element."""

    TWO_BY_FOUR = "2x4"
    TWO_BY_SIX = "2x6"
    TWO_BY_EIGHT = "2x8"
    TWO_BY_TEN = "2x10"
    PLYWOOD_3_4 = "3/4_plywood"
    STEEL_PLATE = "steel_plate"
    BLOCKING = "blocking"

    @classmethod
    def parse(cls, text: object) -> "BackingCategory":
        """Return the member for a value string (``"2x6"``) or member name."""

        if isinstance(text, cls):
            return text
        if isinstance(text, str):
            for member in cls:
                if text == member.value or text.upper() == member.name:
                    return member
        raise ValueError(f"unknown backing category {text!r}")


class PlacementStatus(str, Enum):
    AI_GENERATED = "ai_generated"
    USER_MODIFIED = "user_modified"
    APPROVED = "approved"


@dataclass(frozen=True)
class Bounds:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center_x(self) -> float:
        return (self.left + self.right) * 0.5

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) * 0.5

    @property
    def center(self) -> Point:
        return Point(self.center_x, self.center_y)

    def overlaps(self, other: "Bounds") -> bool:
        """Strict overlap test; rectangles that only share an edge do not overlap."""

        return not (
            self.right <= other.left
            or other.right <= self.left
            or self.bottom <= other.top
            or other.bottom <= self.top
        )

    def overlap_area(self, other: "Bounds") -> float:
        left = max(self.left, other.left)
        right = min(self.right, other.right)
        top = max(self.top, other.top)
        bottom = min(self.bottom, other.bottom)
        if left < right and top < bottom:
            return (right - left) * (bottom - top)
        return 0.0

    def union(self, other: "Bounds") -> "Bounds":
        return Bounds(
            left=min(self.left, other.left),
            top=min(self.top, other.top),
            right=max(self.right, other.right),
            bottom=max(self.bottom, other.bottom),
        )


@dataclass(frozen=True)
class Placement:
    """A rectangular backing element positioned on the drawing."""

    id: str
    location: Location
    dimensions: Dimensions
    category: BackingCategory = BackingCategory.TWO_BY_SIX
    orientation: float = 0.0
    status: PlacementStatus = PlacementStatus.USER_MODIFIED
    component_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", BackingCategory.parse(self.category))
        object.__setattr__(self, "status", PlacementStatus(self.status))

    @property
    def bounds(self) -> Bounds:
        loc = self.location
        dims = self.dimensions
        return Bounds(
            left=loc.x,
            top=loc.y,
            right=loc.x + dims.width,
            bottom=loc.y + dims.height,
        )

    @property
    def center(self) -> Point:
        return self.bounds.center

    def moved_to(self, x: float, y: float) -> "Placement":
        return replace(self, location=replace(self.location, x=float(x), y=float(y)))


@dataclass(frozen=True)
class DocumentBounds:
    """Extent of the drawing in document units."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def is_degenerate(self) -> bool:
        return not (self.width > 0.0 and self.height > 0.0)


@dataclass(frozen=True)
class Viewport:
    zoom: float = 1.0
    pan: Point = field(default_factory=lambda: Point(0.0, 0.0))
    size: Tuple[float, float] = (800.0, 600.0)

    def __post_init__(self) -> None:
        zoom = float(self.zoom)
        if not zoom > 0.0:
            raise ValueError(f"viewport zoom must be positive, got {zoom!r}")
        object.__setattr__(self, "zoom", zoom)
        if not isinstance(self.pan, Point):
            object.__setattr__(self, "pan", Point(*self.pan))
        width, height = self.size
        object.__setattr__(self, "size", (float(width), float(height)))


@dataclass(frozen=True)
class SnapResult:
    snapped: bool
    position: Point
    kind: SnapKind = "edge"
    target_id: Optional[str] = None
    distance: float = 0.0


@dataclass(frozen=True)
class AlignmentSuggestion:
    kind: AlignmentKind
    position: Point
    target_id: str
    distance: float


@dataclass(frozen=True)
class AlignmentGuide:
    """Line segment an overlay can draw while a placement is dragged."""

    orientation: GuideOrientation
    position: float
    start: Point
    end: Point
    target_id: str


@dataclass(frozen=True)
class Collision:
    overlapping_ids: Tuple[str, ...] = ()
    overlap_area: float = 0.0

    @property
    def has_collision(self) -> bool:
        return bool(self.overlapping_ids)


@dataclass(frozen=True)
class GroupSuggestion:
    member_ids: Tuple[str, ...]
    pattern: PatternKind
    bounds: Bounds
    center: Point
    category: BackingCategory

    @property
    def count(self) -> int:
        return len(self.member_ids)


@dataclass(frozen=True)
class Spacing:
    horizontal: float
    vertical: float


@dataclass(frozen=True)
class WallSegment:
    id: str
    start: Point
    end: Point
    thickness: float = 4.5
    kind: WallKind = "interior"


__all__ = [
    "AlignmentGuide",
    "AlignmentKind",
    "AlignmentSuggestion",
    "BackingCategory",
    "Bounds",
    "Collision",
    "Dimensions",
    "DocumentBounds",
    "GroupSuggestion",
    "GuideOrientation",
    "Location",
    "PatternKind",
    "Placement",
    "PlacementStatus",
    "Point",
    "SnapKind",
    "SnapResult",
    "Spacing",
    "Viewport",
    "WallKind",
    "WallSegment",
]
