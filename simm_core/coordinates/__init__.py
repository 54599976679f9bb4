"""
Risk coordinates for SIMM aggregation.

Provides the taxonomy value types and the ``RiskCoordinate`` key that
maps CRIF bucket numbering to SIMM bucket grouping.
"""

from simm_core.coordinates.coordinate import RiskCoordinate
from simm_core.coordinates.qualifier import Qualifier
from simm_core.coordinates.taxonomy import MarginType, ProductClass, RiskClass, SubCurve
from simm_core.coordinates.vertex import Vertex, parse_crif_tenor

__all__ = [
    "RiskCoordinate",
    "Qualifier",
    "Vertex",
    "SubCurve",
    "RiskClass",
    "MarginType",
    "ProductClass",
    "parse_crif_tenor",
]
