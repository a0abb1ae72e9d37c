# File: src/cable_router/routing/trays.py
"""
Cable tray types, drawing presets and tray recommendation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Set, Union
import math

from ..equipment.snap_configs import ConnectionType
from ..equipment.snap_points import WorldSnapPoint


class CableTrayType(Enum):
    """Physical cable support structures."""
    LADDER = "ladder"
    WIRE_MESH = "wire-mesh"
    CONDUIT = "conduit"
    BUSBAR = "busbar"


class CableCategory(Enum):
    """Categories of cable carried by a tray."""
    POWER = "power"
    DATA = "data"
    CONTROL = "control"
    EARTH = "earth"


class Voltage(Enum):
    """Voltage class of a cable route."""
    HV = "hv"
    MV = "mv"
    LV = "lv"
    DATA = "data"


@dataclass(frozen=True)
class TrayStyle:
    """
    Display and installation data for a tray type.

    Attributes:
        name: Display name
        description: What the tray is used for
        color: Display colour
        support_spacing: Distance between supports in metres
    """
    name: str
    description: str
    color: str
    support_spacing: float


TRAY_STYLES: Dict[CableTrayType, TrayStyle] = {
    CableTrayType.LADDER: TrayStyle(
        "Ladder", "Galvanised ladder tray for power cables", "#71717a", 3.0
    ),
    CableTrayType.WIRE_MESH: TrayStyle(
        "Wire Mesh", "Wire mesh tray for data and control cables", "#3b82f6", 2.5
    ),
    CableTrayType.CONDUIT: TrayStyle(
        "Conduit", "Rigid conduit for sensitive cables", "#f59e0b", 2.0
    ),
    CableTrayType.BUSBAR: TrayStyle(
        "Busbar", "Busbar trunking for high voltage distribution", "#b45309", 4.0
    ),
}


@dataclass(frozen=True)
class TrayPreset:
    """
    Tray configuration applied to newly drawn segments.

    Attributes:
        key: Preset identifier
        tray_type: Tray type
        width: Tray width (mm)
        height: Tray side height (mm)
        name: Display name, also used to name new routes
        color: Display colour
        cable_types: Cable categories carried
        voltage: Voltage class of routes drawn with this preset
    """
    key: str
    tray_type: CableTrayType
    width: float
    height: float
    name: str
    color: str
    cable_types: List[CableCategory] = field(default_factory=list)
    voltage: Voltage = Voltage.LV


TRAY_PRESETS: Dict[str, TrayPreset] = {
    "power-main": TrayPreset(
        "power-main", CableTrayType.LADDER, 600, 100, "Main HV/LV Run", "#71717a",
        [CableCategory.POWER, CableCategory.EARTH], Voltage.MV,
    ),
    "power-branch": TrayPreset(
        "power-branch", CableTrayType.LADDER, 300, 100, "Power Branch", "#71717a",
        [CableCategory.POWER, CableCategory.EARTH], Voltage.LV,
    ),
    "data-main": TrayPreset(
        "data-main", CableTrayType.WIRE_MESH, 200, 60, "Main Data Network", "#3b82f6",
        [CableCategory.DATA], Voltage.DATA,
    ),
    "control": TrayPreset(
        "control", CableTrayType.CONDUIT, 50, 50, "Control Cables", "#f59e0b",
        [CableCategory.CONTROL], Voltage.LV,
    ),
    "busbar": TrayPreset(
        "busbar", CableTrayType.BUSBAR, 100, 150, "Busbar", "#b45309",
        [CableCategory.POWER], Voltage.MV,
    ),
}

DEFAULT_PRESET = "power-branch"


@dataclass(frozen=True)
class CableTrayRecommendation:
    """Recommended tray for a connection."""
    tray_type: CableTrayType
    width: float
    reason: str

    def to_dict(self) -> dict:
        return {"tray_type": self.tray_type.value, "width": self.width, "reason": self.reason}


def _as_categories(categories: Iterable[Union[CableCategory, str]]) -> Set[CableCategory]:
    return {c if isinstance(c, CableCategory) else CableCategory(c) for c in categories}


def recommend_cable_tray_type(
    start_snap: WorldSnapPoint,
    end_snap: WorldSnapPoint,
    cable_categories: Iterable[Union[CableCategory, str]],
) -> CableTrayRecommendation:
    """
    Recommend a tray for a connection. The first matching rule wins:

    1. Either end is high voltage: busbar, widest endpoint width.
    2. Power without data: ladder, 600 mm when the widest width reaches
       400 mm, else 300 mm.
    3. Data without power: wire mesh, 200 mm.
    4. Control only: conduit, 50 mm.
    5. Anything else (mixed traffic): ladder, 300 mm.
    """
    categories = _as_categories(cable_categories)

    if ConnectionType.POWER_HT in (start_snap.connection_type, end_snap.connection_type):
        return CableTrayRecommendation(
            CableTrayType.BUSBAR,
            max(start_snap.cable_width, end_snap.cable_width),
            "Busbar recommended for high voltage",
        )

    has_power = CableCategory.POWER in categories
    has_data = CableCategory.DATA in categories

    if has_power and not has_data:
        width = max(start_snap.cable_width, end_snap.cable_width, 300)
        return CableTrayRecommendation(
            CableTrayType.LADDER,
            600 if width >= 400 else 300,
            "Ladder tray for power cables",
        )

    if has_data and not has_power:
        return CableTrayRecommendation(
            CableTrayType.WIRE_MESH, 200, "Wire mesh tray for data cables"
        )

    if categories == {CableCategory.CONTROL}:
        return CableTrayRecommendation(
            CableTrayType.CONDUIT, 50, "Conduit for control cables"
        )

    return CableTrayRecommendation(
        CableTrayType.LADDER, 300, "Standard ladder tray (mixed)"
    )


def estimate_support_count(tray_type: CableTrayType, length: float) -> int:
    """Supports needed along a straight tray run of the given length (m)."""
    if length <= 0:
        return 0
    return math.ceil(length / TRAY_STYLES[tray_type].support_spacing) + 1
