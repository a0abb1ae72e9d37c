# File: src/cable_router/__init__.py
"""
Cable routing engine for mining-farm layouts.

Derives equipment connection points, clearance and forbidden zones, safe
cruising heights, routed cable paths, collision reports and cable tray
recommendations from a snapshot of the scene objects.
"""

__version__ = "0.1.0"
