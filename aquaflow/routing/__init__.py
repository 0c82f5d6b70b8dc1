"""Route enumeration and ranking.

Module structure:
- amounts.py: decimal <-> smallest-unit conversion
- enumerator.py: RouteEnumerator (direct and two-hop candidates)
- scorer.py: RouteScorer (weighted scoring and selection)
"""

from aquaflow.routing.amounts import from_base_units, to_base_units
from aquaflow.routing.enumerator import DEFAULT_INTERMEDIATES, RouteEnumerator
from aquaflow.routing.scorer import RouteScorer

__all__ = [
    "DEFAULT_INTERMEDIATES",
    "RouteEnumerator",
    "RouteScorer",
    "from_base_units",
    "to_base_units",
]
