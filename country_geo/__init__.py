"""
Country boundary preprocessing.

Turns a Natural Earth style GeoJSON FeatureCollection into a lookup of
country records keyed by ISO code:
1. Reads the FeatureCollection (preprocess.py)
2. Drops features without an assigned code
3. Normalizes every geometry to MultiPolygon coordinates (normalize.py)
4. Writes the lookup as JSON
"""

from .normalize import UnsupportedGeometryError, normalize

__all__ = ['UnsupportedGeometryError', 'normalize']
