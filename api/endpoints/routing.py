# File: api/endpoints/routing.py
from fastapi import APIRouter
from typing import Dict, List, Any
import logging

from api.models.routing_models import (
    CollisionRequest,
    HeightRequest,
    PathRequest,
    PathResponse,
    SceneRequest,
    SnapPointsResponse,
    TrayRequest,
    ZonesResponse,
    count_by_connection_type,
)
from api.utils.errors import ResourceNotFoundError, handle_exception
from cable_router.equipment.snap_points import WorldSnapPoint, generate_scene_snap_points
from cable_router.routing.collisions import check_path_collisions
from cable_router.routing.height import calculate_optimal_height
from cable_router.routing.path_synthesizer import generate_optimized_path, path_length
from cable_router.routing.trays import recommend_cable_tray_type
from cable_router.routing.zones import generate_cable_zones

logger = logging.getLogger("cable_router.api")

# Authentication is attached when the router is included in api.main
router = APIRouter()


def _find_snap_point(snap_points: List[WorldSnapPoint], snap_id: str) -> WorldSnapPoint:
    for snap_point in snap_points:
        if snap_point.id == snap_id:
            return snap_point
    raise ResourceNotFoundError("snap point", snap_id)


@router.post("/snap-points", response_model=SnapPointsResponse)
async def snap_points(request: SceneRequest):
    """
    Compute the world snap points of every object in the scene.

    Unknown equipment types fall back to generic roof and earth points.
    """
    try:
        points = [sp.to_dict() for sp in generate_scene_snap_points(request.scene_objects())]
        logger.info(f"Generated {len(points)} snap points for {len(request.objects)} objects")
        return SnapPointsResponse(
            snap_points=points,
            count=len(points),
            by_type=count_by_connection_type(points),
        )
    except Exception as e:
        raise handle_exception(e, "scene")


@router.post("/zones", response_model=ZonesResponse)
async def zones(request: SceneRequest):
    """
    Generate equipment, forbidden and passage zones for the scene.
    """
    try:
        zone_list = generate_cable_zones(request.scene_objects(), request.config())
        return ZonesResponse(zones=[z.to_dict() for z in zone_list], count=len(zone_list))
    except Exception as e:
        raise handle_exception(e, "scene")


@router.post("/height", response_model=Dict[str, Any])
async def height(request: HeightRequest):
    """
    Arbitrate the cruising height of a straight run between two points.

    Forbidden-zone crossings are reported as warnings with is_valid false.
    """
    try:
        config = request.config()
        zone_list = generate_cable_zones(request.scene_objects(), config)
        result = calculate_optimal_height(
            request.start.to_vector(), request.end.to_vector(), zone_list, config
        )
        return result.to_dict()
    except Exception as e:
        raise handle_exception(e, "height request")


@router.post("/path", response_model=PathResponse)
async def path(request: PathRequest):
    """
    Synthesize a path between two snap points of the scene.

    The response bundles the path, its height arbitration, a collision check
    and a tray recommendation. Everything is recomputed from the request.
    """
    try:
        config = request.config()
        objects = request.scene_objects()
        snap_list = generate_scene_snap_points(objects)
        start_snap = _find_snap_point(snap_list, request.start_snap_id)
        end_snap = _find_snap_point(snap_list, request.end_snap_id)

        zone_list = generate_cable_zones(objects, config)
        height_result = calculate_optimal_height(
            start_snap.position, end_snap.position, zone_list, config
        )
        segments = generate_optimized_path(
            start_snap, end_snap, zone_list, config, height_result
        )
        collisions = check_path_collisions(segments, zone_list, objects)
        tray = recommend_cable_tray_type(start_snap, end_snap, request.cable_categories)

        logger.info(
            f"Path {start_snap.id} -> {end_snap.id}: {len(segments)} segments, "
            f"{path_length(segments):.2f}m"
        )
        return PathResponse(
            segments=[s.to_dict() for s in segments],
            total_length=path_length(segments),
            height=height_result.to_dict(),
            collisions=collisions.to_dict(),
            tray=tray.to_dict(),
        )
    except Exception as e:
        raise handle_exception(e, "snap point")


@router.post("/collisions", response_model=Dict[str, Any])
async def collisions(request: CollisionRequest):
    """
    Check a path against the forbidden volumes of the scene.
    """
    try:
        objects = request.scene_objects()
        zone_list = generate_cable_zones(objects, request.config())
        result = check_path_collisions(
            [segment.to_segment() for segment in request.path], zone_list, objects
        )
        return result.to_dict()
    except Exception as e:
        raise handle_exception(e, "path")


@router.post("/tray", response_model=Dict[str, Any])
async def tray(request: TrayRequest):
    """
    Recommend a tray type and width for a connection between two snap points.
    """
    try:
        snap_list = generate_scene_snap_points(request.scene_objects())
        start_snap = _find_snap_point(snap_list, request.start_snap_id)
        end_snap = _find_snap_point(snap_list, request.end_snap_id)
        return recommend_cable_tray_type(start_snap, end_snap, request.cable_categories).to_dict()
    except Exception as e:
        raise handle_exception(e, "snap point")
