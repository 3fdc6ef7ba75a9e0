"""
Constants for the country boundary preprocessing.

Import from here to keep property keys and defaults consistent.
"""

# Country code assigned to features with no ISO code (e.g. Antarctica, N. Cyprus)
SENTINEL_CODE = -99

# Feature property keys
NAME_KEY = 'admin'
CODE_KEY = 'iso_a2_eh'

# Geometry discriminators
POLYGON = 'Polygon'
MULTI_POLYGON = 'MultiPolygon'
SUPPORTED_GEOMETRIES = (POLYGON, MULTI_POLYGON)

# Default input file
DEFAULT_INPUT = 'map.geo.json'


def is_sentinel(code) -> bool:
    """
    Check whether a country code is the "no code assigned" marker.

    Some exports write the marker as a string, so both forms match.

    Examples:
        >>> is_sentinel(-99)
        True
        >>> is_sentinel('-99')
        True
        >>> is_sentinel('NO')
        False
    """
    return code == SENTINEL_CODE or code == str(SENTINEL_CODE)
