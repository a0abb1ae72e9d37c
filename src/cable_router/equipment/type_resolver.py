# File: src/cable_router/equipment/type_resolver.py
"""
Resolution of loose object-type strings to canonical equipment types.

Host scenes name equipment freely ("Antspace HD5 container", "Dry-cooler 2",
...). A type resolves to a canonical template key by exact match first and
otherwise through a substring alias table. When several aliases occur in the
same string the longest one wins, ties broken alphabetically, so the outcome
never depends on table order. Matches that point at different canonical types
are flagged as ambiguous.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .snap_configs import EQUIPMENT_SNAP_CONFIGS
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


TYPE_ALIASES: Dict[str, str] = {
    "container": "iso-container-40ft",
    "iso-container": "iso-container-40ft",
    "antspace": "iso-container-40ft",
    "hd5": "iso-container-40ft",
    "transformer": "oil-transformer",
    "transfo": "oil-transformer",
    "cooling": "bitmain-cooling-ec2-dt",
    "ec2-dt": "bitmain-cooling-ec2-dt",
    "dry-cooler": "bitmain-cooling-ec2-dt",
    "pdu": "pdu",
    "distribution": "pdu",
    "skid": "pdu",
    "rmu": "switchgear",
    "switchgear": "switchgear",
    "generator": "generator",
    "genset": "generator",
}


@dataclass
class TypeResolution:
    """
    Outcome of resolving an object type.

    Attributes:
        requested: The type string as supplied
        canonical_type: Resolved template key, or None when nothing matched
        matched_alias: Alias that decided the match (None for exact matches)
        candidates: Canonical types of every alias found in the string
        ambiguous: True when the matching aliases disagree on the canonical type
    """
    requested: str
    canonical_type: Optional[str] = None
    matched_alias: Optional[str] = None
    candidates: List[str] = field(default_factory=list)
    ambiguous: bool = False

    @property
    def is_resolved(self) -> bool:
        return self.canonical_type is not None


def _alias_sort_key(alias: str):
    return (-len(alias), alias)


def resolve_object_type_detailed(
    object_type: str,
    aliases: Optional[Dict[str, str]] = None,
) -> TypeResolution:
    """
    Resolve an object type and report how the decision was made.

    Args:
        object_type: Loose type string from the scene
        aliases: Alias table to use instead of TYPE_ALIASES

    Returns:
        TypeResolution describing the match
    """
    alias_table = TYPE_ALIASES if aliases is None else aliases
    type_lc = object_type.lower()

    if type_lc in EQUIPMENT_SNAP_CONFIGS:
        return TypeResolution(
            requested=object_type,
            canonical_type=type_lc,
            candidates=[type_lc],
        )

    matches = sorted(
        (alias for alias in alias_table if alias in type_lc),
        key=_alias_sort_key,
    )
    if not matches:
        return TypeResolution(requested=object_type)

    candidates: List[str] = []
    for alias in matches:
        target = alias_table[alias]
        if target not in candidates:
            candidates.append(target)

    best = matches[0]
    resolution = TypeResolution(
        requested=object_type,
        canonical_type=alias_table[best],
        matched_alias=best,
        candidates=candidates,
        ambiguous=len(candidates) > 1,
    )
    if resolution.ambiguous:
        logger.warning(
            f"Ambiguous equipment type '{object_type}': aliases {matches} "
            f"map to {candidates}; using '{resolution.canonical_type}' "
            f"(longest alias '{best}')"
        )
    return resolution


def resolve_object_type(object_type: str) -> Optional[str]:
    """Canonical type for a loose type string, or None if unknown."""
    return resolve_object_type_detailed(object_type).canonical_type
