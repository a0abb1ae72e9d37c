# File: src/cable_router/routing/path_synthesizer.py
"""
Cable path synthesis between two snap points.

Produces one deterministic candidate path. A cable leaves each low
connection point along its connection direction for a short stub, rises
vertically to the cruising height, runs horizontally at that height and
descends the same way at the far end.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .height import HeightCalculationResult, calculate_optimal_height
from .zones import CableZone
from ..config.height_config import CableHeightConfig, DEFAULT_HEIGHT_CONFIG
from ..equipment.snap_points import WorldSnapPoint
from ..utils.logging_config import get_logger
from ..utils.vectors import Vector3

logger = get_logger(__name__)

# Height difference below which two elevations are treated as equal (m)
HEIGHT_TOLERANCE = 0.1
# Length of the stub leaving an equipment face before any turn (m)
EXIT_STUB_LENGTH = 0.3


class SegmentKind(Enum):
    """Geometric kind of a path segment."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    RAMP = "ramp"


@dataclass(frozen=True)
class CablePathSegment:
    """
    A straight piece of a synthesized cable path.

    Attributes:
        start: Start point (world metres)
        end: End point (world metres)
        height: Elevation assigned to the segment
        kind: Horizontal, vertical riser or ramp
    """
    start: Vector3
    end: Vector3
    height: float
    kind: SegmentKind

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    def reversed(self) -> "CablePathSegment":
        """Return a copy with start and end swapped."""
        return CablePathSegment(self.end, self.start, self.height, self.kind)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start.to_list(),
            "end": self.end.to_list(),
            "height": self.height,
            "kind": self.kind.value,
            "length": self.length,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CablePathSegment":
        kind = data.get("kind", "horizontal")
        if isinstance(kind, str):
            kind = SegmentKind(kind)
        return cls(
            start=Vector3.from_iterable(data["start"]),
            end=Vector3.from_iterable(data["end"]),
            height=data.get("height", 0.0),
            kind=kind,
        )


def classify_segment(start: Vector3, end: Vector3) -> SegmentKind:
    """Kind of a straight segment from its geometry."""
    dx = end.x - start.x
    dz = end.z - start.z
    if (dx * dx + dz * dz) ** 0.5 < 1e-6 and abs(end.y - start.y) > 1e-6:
        return SegmentKind.VERTICAL
    if abs(end.y - start.y) > HEIGHT_TOLERANCE:
        return SegmentKind.RAMP
    return SegmentKind.HORIZONTAL


def path_length(path: Sequence[CablePathSegment]) -> float:
    """Total length of a path."""
    return sum(segment.length for segment in path)


def _needs_riser(point: Vector3, cruise_height: float) -> bool:
    return point.y < cruise_height - HEIGHT_TOLERANCE


def _exit_riser(
    snap_point: WorldSnapPoint,
    cruise_height: float,
) -> Tuple[CablePathSegment, CablePathSegment, Vector3]:
    """Exit stub and riser leaving a snap point, plus the riser top."""
    origin = snap_point.position
    exit_point = origin + snap_point.direction * EXIT_STUB_LENGTH
    top = exit_point.with_y(cruise_height)
    stub = CablePathSegment(origin, exit_point, origin.y, classify_segment(origin, exit_point))
    riser = CablePathSegment(exit_point, top, cruise_height, SegmentKind.VERTICAL)
    return stub, riser, top


def generate_optimized_path(
    start_snap: WorldSnapPoint,
    end_snap: WorldSnapPoint,
    zones: Sequence[CableZone],
    config: CableHeightConfig = DEFAULT_HEIGHT_CONFIG,
    height_result: Optional[HeightCalculationResult] = None,
) -> List[CablePathSegment]:
    """
    Routable polyline between two snap points.

    Args:
        start_snap: Connection point the cable leaves
        end_snap: Connection point the cable reaches
        zones: Zone set of the current scene
        config: Height rules
        height_result: Precomputed arbitration for this pair, if available

    Returns:
        One to five segments: a direct segment when both ends already sit at
        the cruising height, otherwise stub/riser pairs around one cruise run
    """
    start = start_snap.position
    end = end_snap.position
    if height_result is None:
        height_result = calculate_optimal_height(start, end, zones, config)
    cruise_height = height_result.height

    start_low = _needs_riser(start, cruise_height)
    end_low = _needs_riser(end, cruise_height)

    if not start_low and not end_low:
        kind = (
            SegmentKind.RAMP
            if abs(start.y - end.y) > HEIGHT_TOLERANCE
            else SegmentKind.HORIZONTAL
        )
        logger.debug(f"Direct {kind.value} path {start_snap.id} -> {end_snap.id}")
        return [CablePathSegment(start, end, max(start.y, end.y), kind)]

    segments: List[CablePathSegment] = []
    cruise_start = start
    cruise_end = end

    if start_low:
        stub, riser, cruise_start = _exit_riser(start_snap, cruise_height)
        segments.extend([stub, riser])

    if end_low:
        end_stub, end_riser, cruise_end = _exit_riser(end_snap, cruise_height)

    segments.append(
        CablePathSegment(cruise_start, cruise_end, cruise_height, SegmentKind.HORIZONTAL)
    )

    if end_low:
        # mirror of the exit riser, walked from the cruise run down to the snap point
        segments.extend([end_riser.reversed(), end_stub.reversed()])

    logger.debug(
        f"Path {start_snap.id} -> {end_snap.id}: {len(segments)} segments "
        f"cruising at {cruise_height:.2f}m"
    )
    return segments
