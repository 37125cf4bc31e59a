"""AOI Geometry Utility.

Area and centroid estimation for customer-drawn areas of interest (AOIs)
submitted through imagery requests and saved-AOI intake. Accepts GeoJSON
``Polygon`` rings and ``Point`` centres in WGS 84 degrees.
"""

__version__ = "0.1.0"
