# File: src/cable_router/config/height_config.py
"""
Cable height configuration.

Heights are in metres above the ground plane.
"""

from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class CableHeightConfig:
    """
    Height rules used by zone generation and height arbitration.

    Attributes:
        min_passage_height: Minimum cable height over walkways
        min_clearance_above_equipment: Clearance kept above equipment tops
        default_tray_height: Preferred cruising height when nothing forces it higher
        max_height: Highest allowed cable height
        equipment_margin: Horizontal padding added around equipment footprints
        passage_margin: Perimeter margin added around the scene footprint
    """
    min_passage_height: float = 3.0
    min_clearance_above_equipment: float = 0.3
    default_tray_height: float = 3.5
    max_height: float = 6.0
    equipment_margin: float = 0.5
    passage_margin: float = 5.0

    def validate(self) -> None:
        """
        Check the configuration is internally consistent.

        Raises:
            ValueError: If heights are out of order or margins are negative
        """
        if self.min_passage_height < 0:
            raise ValueError("min_passage_height must be non-negative")
        if self.max_height < self.min_passage_height:
            raise ValueError("max_height must be >= min_passage_height")
        if not self.min_passage_height <= self.default_tray_height <= self.max_height:
            raise ValueError(
                "default_tray_height must lie between min_passage_height and max_height"
            )
        if self.min_clearance_above_equipment < 0:
            raise ValueError("min_clearance_above_equipment must be non-negative")
        if self.equipment_margin < 0 or self.passage_margin < 0:
            raise ValueError("margins must be non-negative")

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "CableHeightConfig":
        defaults = cls()
        return cls(**{
            key: float(data.get(key, value))
            for key, value in asdict(defaults).items()
        })


DEFAULT_HEIGHT_CONFIG = CableHeightConfig()
