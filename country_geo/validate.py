"""
Geometry summary for a normalized country lookup.

Reports counts only; the lookup itself is never modified.
"""

import logging
from typing import Any, Dict

from shapely.geometry import shape

from .constants import MULTI_POLYGON

logger = logging.getLogger(__name__)


def summarize(countries: Dict[Any, Dict]) -> Dict:
    """
    Count polygons and rings and flag geometries shapely considers invalid.

    Args:
        countries: Output of normalize()

    Returns:
        Dict with 'countries', 'polygons', 'rings' and 'invalid' (list of codes)
    """
    summary = {
        'countries': len(countries),
        'polygons': 0,
        'rings': 0,
        'invalid': [],
    }

    for code, record in countries.items():
        polygons = record['geometry']

        try:
            polygon_count = len(polygons)
            ring_count = sum(len(rings) for rings in polygons)
            geom = shape({'type': MULTI_POLYGON, 'coordinates': polygons})
        except Exception as e:
            logger.debug(f"Could not build geometry for {code}: {e}")
            summary['invalid'].append(code)
            continue

        summary['polygons'] += polygon_count
        summary['rings'] += ring_count
        if not geom.is_valid:
            summary['invalid'].append(code)

    return summary


def log_summary(summary: Dict) -> None:
    """Log a summary produced by summarize()."""
    logger.info("Geometry summary:")
    logger.info(f"  Countries: {summary['countries']}")
    logger.info(f"  Polygons:  {summary['polygons']}")
    logger.info(f"  Rings:     {summary['rings']}")
    if summary['invalid']:
        logger.warning(f"  Invalid geometry: {', '.join(str(c) for c in summary['invalid'])}")
