# File: src/cable_router/drawing/cable_route.py
"""
User-drawn cable routes.

A route aggregates the points and tray segments drawn by the user. Segments
reference points by id and every referenced point must belong to the same
route. Routes can be viewed as a networkx graph for connectivity checks and
fitting detection (elbows, tees, crosses).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional
import math
import uuid

import networkx as nx

from ..errors import RouteIntegrityError
from ..routing.trays import CableCategory, CableTrayType, Voltage
from ..utils.logging_config import get_logger
from ..utils.vectors import Vector3

logger = get_logger(__name__)

# Points closer than this are the same graph node (m)
POINT_MERGE_TOLERANCE = 1e-6


def generate_id(prefix: str = "cable") -> str:
    """Unique id for routes, points, segments and fittings."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


class PointType(Enum):
    """Role of a point within a route."""
    START = "start"
    WAYPOINT = "waypoint"
    END = "end"
    JUNCTION = "junction"
    BRANCH = "branch"


class RouteType(Enum):
    MAIN = "main"
    BRANCH = "branch"
    FEEDER = "feeder"


class FittingType(Enum):
    """Tray fittings inferred from route geometry."""
    ELBOW_90 = "elbow-90"
    ELBOW_45 = "elbow-45"
    TEE = "tee"
    CROSS = "cross"
    REDUCER = "reducer"
    END_CAP = "end-cap"
    JUNCTION_BOX = "junction-box"


@dataclass
class CablePoint:
    """
    A point of a cable route.

    Attributes:
        id: Unique point id
        position: World position (metres)
        point_type: Role in the route
        connected_to: Ids of segments attached to this point
        object_id: Equipment the point is attached to, if snapped to one
    """
    id: str
    position: Vector3
    point_type: PointType = PointType.WAYPOINT
    connected_to: List[str] = field(default_factory=list)
    object_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "position": self.position.to_list(),
            "point_type": self.point_type.value,
            "connected_to": list(self.connected_to),
            "object_id": self.object_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CablePoint":
        return cls(
            id=data["id"],
            position=Vector3.from_iterable(data["position"]),
            point_type=PointType(data.get("point_type", "waypoint")),
            connected_to=list(data.get("connected_to", [])),
            object_id=data.get("object_id"),
        )


@dataclass
class CableSegment:
    """
    A tray segment between two route points.

    Attributes:
        id: Unique segment id
        start_point_id: Id of the start point (must exist in the route)
        end_point_id: Id of the end point (must exist in the route)
        tray_type: Tray type
        width: Tray width (mm)
        height: Tray side height (mm)
        cable_count: Number of cables carried
        cable_types: Cable categories carried
        color: Display colour
        locked: Whether the segment is protected from editing
        visible: Whether the segment is displayed
    """
    id: str
    start_point_id: str
    end_point_id: str
    tray_type: CableTrayType = CableTrayType.LADDER
    width: float = 300
    height: float = 100
    cable_count: int = 6
    cable_types: List[CableCategory] = field(default_factory=list)
    color: str = "#71717a"
    locked: bool = False
    visible: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "start_point_id": self.start_point_id,
            "end_point_id": self.end_point_id,
            "tray_type": self.tray_type.value,
            "width": self.width,
            "height": self.height,
            "cable_count": self.cable_count,
            "cable_types": [c.value for c in self.cable_types],
            "color": self.color,
            "locked": self.locked,
            "visible": self.visible,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CableSegment":
        return cls(
            id=data["id"],
            start_point_id=data["start_point_id"],
            end_point_id=data["end_point_id"],
            tray_type=CableTrayType(data.get("tray_type", "ladder")),
            width=data.get("width", 300),
            height=data.get("height", 100),
            cable_count=data.get("cable_count", 6),
            cable_types=[CableCategory(c) for c in data.get("cable_types", [])],
            color=data.get("color", "#71717a"),
            locked=data.get("locked", False),
            visible=data.get("visible", True),
        )


@dataclass
class CableFitting:
    """A fitting required where tray segments meet."""
    id: str
    fitting_type: FittingType
    position: Vector3
    width: float
    connected_segments: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "fitting_type": self.fitting_type.value,
            "position": self.position.to_list(),
            "width": self.width,
            "connected_segments": list(self.connected_segments),
        }


@dataclass
class CableRoute:
    """
    A user-drawn cable route.

    Attributes:
        id: Unique route id
        name: Display name
        segments: Tray segments in drawing order
        points: Route points in drawing order
        route_type: Main, branch or feeder
        voltage: Voltage class
        total_length: Running sum of segment lengths (m)
        color: Display colour
        visible: Whether the route is displayed
    """
    id: str
    name: str
    segments: List[CableSegment] = field(default_factory=list)
    points: List[CablePoint] = field(default_factory=list)
    route_type: RouteType = RouteType.MAIN
    voltage: Voltage = Voltage.LV
    total_length: float = 0.0
    color: str = "#71717a"
    visible: bool = True

    def get_point(self, point_id: str) -> Optional[CablePoint]:
        for point in self.points:
            if point.id == point_id:
                return point
        return None

    def add_segment(
        self,
        start: CablePoint,
        end: CablePoint,
        segment: CableSegment,
    ) -> float:
        """
        Append a point pair and the segment joining them.

        Returns:
            Length of the new segment, already added to total_length
        """
        start.connected_to.append(segment.id)
        end.connected_to.append(segment.id)
        self.points.extend([start, end])
        self.segments.append(segment)
        length = start.position.distance_to(end.position)
        self.total_length += length
        return length

    def segment_length(self, segment: CableSegment) -> float:
        """
        Euclidean length of a segment.

        Raises:
            RouteIntegrityError: If an endpoint is not part of this route
        """
        start = self.get_point(segment.start_point_id)
        if start is None:
            raise RouteIntegrityError(self.id, segment.id, segment.start_point_id)
        end = self.get_point(segment.end_point_id)
        if end is None:
            raise RouteIntegrityError(self.id, segment.id, segment.end_point_id)
        return start.position.distance_to(end.position)

    def validate(self) -> None:
        """
        Check every segment endpoint exists in this route.

        Raises:
            RouteIntegrityError: On the first dangling reference
        """
        point_ids = {p.id for p in self.points}
        for segment in self.segments:
            for point_id in (segment.start_point_id, segment.end_point_id):
                if point_id not in point_ids:
                    raise RouteIntegrityError(self.id, segment.id, point_id)

    def recompute_length(self) -> float:
        """Recalculate total_length from the segments."""
        self.total_length = sum(self.segment_length(s) for s in self.segments)
        return self.total_length

    def to_graph(self, merge_tolerance: float = POINT_MERGE_TOLERANCE) -> nx.Graph:
        """
        Undirected graph of the route.

        Points drawn at the same location (the incremental drawing creates a
        fresh point pair per segment) collapse into one node keyed by the
        first point id at that location. Nodes carry ``position`` and
        ``point_ids``; edges carry ``segment_id``, ``length`` and ``width``.
        """
        self.validate()
        graph = nx.Graph()
        representative: Dict[str, str] = {}

        for point in self.points:
            node_id = None
            for existing, data in graph.nodes(data=True):
                if data["position"].is_close(point.position, merge_tolerance):
                    node_id = existing
                    break
            if node_id is None:
                node_id = point.id
                graph.add_node(node_id, position=point.position, point_ids=[])
            graph.nodes[node_id]["point_ids"].append(point.id)
            representative[point.id] = node_id

        for segment in self.segments:
            u = representative[segment.start_point_id]
            v = representative[segment.end_point_id]
            if u == v:
                continue
            graph.add_edge(
                u, v,
                segment_id=segment.id,
                length=self.segment_length(segment),
                width=segment.width,
            )
        return graph

    def is_connected(self) -> bool:
        """True when every drawn point is reachable from every other."""
        graph = self.to_graph()
        if graph.number_of_nodes() == 0:
            return True
        return nx.is_connected(graph)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "segments": [s.to_dict() for s in self.segments],
            "points": [p.to_dict() for p in self.points],
            "route_type": self.route_type.value,
            "voltage": self.voltage.value,
            "total_length": self.total_length,
            "color": self.color,
            "visible": self.visible,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CableRoute":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            segments=[CableSegment.from_dict(s) for s in data.get("segments", [])],
            points=[CablePoint.from_dict(p) for p in data.get("points", [])],
            route_type=RouteType(data.get("route_type", "main")),
            voltage=Voltage(data.get("voltage", "lv")),
            total_length=data.get("total_length", 0.0),
            color=data.get("color", "#71717a"),
            visible=data.get("visible", True),
        )


def _plan_heading(a: Vector3, b: Vector3) -> float:
    return math.atan2(b.z - a.z, b.x - a.x)


def classify_turn(previous: Vector3, current: Vector3, following: Vector3) -> Optional[FittingType]:
    """
    Elbow needed at ``current`` for a plan-view turn, or None.

    Turns between 0.4π and 0.6π need a 90° elbow, between 0.2π and 0.3π a
    45° elbow.
    """
    turn = abs(_plan_heading(current, following) - _plan_heading(previous, current))
    if turn > math.pi:
        turn = 2 * math.pi - turn

    if math.pi * 0.4 < turn < math.pi * 0.6:
        return FittingType.ELBOW_90
    if math.pi * 0.2 < turn < math.pi * 0.3:
        return FittingType.ELBOW_45
    return None


def detect_fittings(route: CableRoute) -> List[CableFitting]:
    """
    Fittings implied by the route geometry.

    Degree-2 nodes get an elbow when the plan-view turn calls for one,
    degree-3 nodes a tee and higher degrees a cross.
    """
    graph = route.to_graph()
    fittings: List[CableFitting] = []

    for node, data in graph.nodes(data=True):
        degree = graph.degree(node)
        if degree < 2:
            continue
        edges = list(graph.edges(node, data=True))
        segment_ids = [edge_data["segment_id"] for _, _, edge_data in edges]
        width = max(edge_data["width"] for _, _, edge_data in edges)

        if degree == 2:
            neighbours = [other for _, other, _ in edges]
            fitting_type = classify_turn(
                graph.nodes[neighbours[0]]["position"],
                data["position"],
                graph.nodes[neighbours[1]]["position"],
            )
        elif degree == 3:
            fitting_type = FittingType.TEE
        else:
            fitting_type = FittingType.CROSS

        if fitting_type is None:
            continue
        fittings.append(CableFitting(
            id=generate_id("fitting"),
            fitting_type=fitting_type,
            position=data["position"],
            width=width,
            connected_segments=segment_ids,
        ))

    logger.debug(f"Route {route.id}: {len(fittings)} fittings")
    return fittings


def duplicate_route(route: CableRoute, offset: Vector3 = Vector3(2.0, 0.0, 0.0)) -> CableRoute:
    """
    Copy of a route with fresh ids, translated by ``offset``.
    """
    point_ids = {p.id: generate_id() for p in route.points}
    segment_ids = {s.id: generate_id() for s in route.segments}

    points = [
        CablePoint(
            id=point_ids[p.id],
            position=p.position + offset,
            point_type=p.point_type,
            connected_to=[segment_ids.get(s, s) for s in p.connected_to],
            object_id=p.object_id,
        )
        for p in route.points
    ]
    segments = [
        CableSegment(
            id=segment_ids[s.id],
            start_point_id=point_ids.get(s.start_point_id, s.start_point_id),
            end_point_id=point_ids.get(s.end_point_id, s.end_point_id),
            tray_type=s.tray_type,
            width=s.width,
            height=s.height,
            cable_count=s.cable_count,
            cable_types=list(s.cable_types),
            color=s.color,
            locked=s.locked,
            visible=s.visible,
        )
        for s in route.segments
    ]
    return CableRoute(
        id=generate_id(),
        name=f"{route.name} (Copy)",
        segments=segments,
        points=points,
        route_type=route.route_type,
        voltage=route.voltage,
        total_length=route.total_length,
        color=route.color,
        visible=route.visible,
    )


@dataclass
class RouteStatistics:
    """Totals over a set of routes."""
    total_length: float = 0.0
    segment_count: int = 0
    point_count: int = 0
    route_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_length": self.total_length,
            "segment_count": self.segment_count,
            "point_count": self.point_count,
            "route_count": self.route_count,
        }


def summarize_routes(routes: Iterable[CableRoute]) -> RouteStatistics:
    stats = RouteStatistics()
    for route in routes:
        stats.total_length += route.total_length
        stats.segment_count += len(route.segments)
        stats.point_count += len(route.points)
        stats.route_count += 1
    return stats
