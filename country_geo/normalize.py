#!/usr/bin/env python3
"""
Country feature normalization.

Converts a GeoJSON FeatureCollection of country boundaries into a lookup
keyed by country code:

    {"NO": {"country_name": "Norway", "geometry": [[[[x, y], ...]]]}}

Every geometry in the output has MultiPolygon nesting (polygons -> rings ->
points), so consumers never branch on geometry type. Features without an
assigned code are skipped. Coordinates pass through untouched.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from tqdm import tqdm

from .constants import (
    CODE_KEY,
    MULTI_POLYGON,
    NAME_KEY,
    POLYGON,
    SUPPORTED_GEOMETRIES,
    is_sentinel,
)

logger = logging.getLogger(__name__)


class UnsupportedGeometryError(ValueError):
    """Raised in strict mode for geometry types other than (Multi)Polygon."""

    def __init__(self, geometry_type: Any):
        super().__init__(
            f"Unsupported geometry type: {geometry_type!r} "
            f"(expected one of {', '.join(SUPPORTED_GEOMETRIES)})"
        )
        self.geometry_type = geometry_type


def normalize_geometry(geometry: Dict, strict: bool = False) -> List:
    """
    Return geometry coordinates with MultiPolygon nesting.

    A Polygon (list of rings) is wrapped in a one-element list. Any other
    type is assumed to be a MultiPolygon already and is returned as-is.

    Args:
        geometry: GeoJSON geometry object
        strict: Raise UnsupportedGeometryError for types other than
            Polygon and MultiPolygon instead of passing them through

    Returns:
        List of polygons, each a list of rings
    """
    geom_type = geometry['type']
    coordinates = geometry['coordinates']

    if geom_type == POLYGON:
        return [coordinates]

    if geom_type != MULTI_POLYGON:
        if strict:
            raise UnsupportedGeometryError(geom_type)
        logger.debug(f"Unexpected geometry type {geom_type!r}, treating as {MULTI_POLYGON}")

    return coordinates


def normalize_feature(feature: Dict, strict: bool = False) -> Optional[Tuple[Any, Dict]]:
    """
    Normalize a single country feature.

    Args:
        feature: GeoJSON feature with admin/iso_a2_eh properties
        strict: Passed through to normalize_geometry

    Returns:
        (country_code, record) tuple, or None if the feature has no code
    """
    props = feature['properties']
    country_name = props[NAME_KEY]
    country_code = props[CODE_KEY]

    if is_sentinel(country_code):
        return None

    return country_code, {
        'country_name': country_name,
        'geometry': normalize_geometry(feature['geometry'], strict=strict),
    }


def _log_skip(country_name: str) -> None:
    logger.warning(f"skipping {country_name}")


def normalize(
    document: Dict,
    on_skip: Optional[Callable[[str], None]] = None,
    strict: bool = False,
    progress: bool = False
) -> Dict[Any, Dict]:
    """
    Build the country lookup from a FeatureCollection.

    Features are processed in input order. When two features share a code
    the later one replaces the earlier one; this is logged, not rejected.

    Args:
        document: Parsed GeoJSON FeatureCollection
        on_skip: Called with the country name of every skipped feature
            (default: log a warning)
        strict: Reject geometry types other than Polygon/MultiPolygon
        progress: Show a progress bar over the features

    Returns:
        Dict of country code -> {'country_name', 'geometry'}

    Raises:
        KeyError, TypeError: Document or feature is missing required fields
        UnsupportedGeometryError: Unknown geometry type in strict mode
    """
    report_skip = on_skip or _log_skip
    features = document['features']

    out = {}
    for feature in tqdm(features, desc="Normalizing", disable=not progress):
        result = normalize_feature(feature, strict=strict)
        if result is None:
            report_skip(feature['properties'][NAME_KEY])
            continue

        country_code, record = result
        if country_code in out:
            logger.warning(
                f"Duplicate country code {country_code!r}: "
                f"{record['country_name']} replaces {out[country_code]['country_name']}"
            )
        out[country_code] = record

    logger.debug(f"Normalized {len(out)} countries from {len(features)} features")
    return out
