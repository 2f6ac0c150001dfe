"""
The `constants` module defines the reference values of the Swiss LV03 and LV95 frames.
"""

# Frame offsets
"""
Offset added to an LV03 northing to obtain the LV95 northing. Units: *m*
"""
LV95_NORTH_OFFSET = 1_000_000.0

"""
Offset added to an LV03 easting to obtain the LV95 easting. Units: *m*
"""
LV95_EAST_OFFSET = 2_000_000.0

# LV03 validity region

"""
Smallest LV03 northing considered to lie in Switzerland. Units: *m*
"""
LV03_NORTH_MIN = 70_000.0

"""
Largest LV03 northing considered to lie in Switzerland. Units: *m*
"""
LV03_NORTH_MAX = 300_000.0

"""
Smallest LV03 easting considered to lie in Switzerland. Units: *m*
"""
LV03_EAST_MIN = 480_000.0

"""
Largest LV03 easting considered to lie in Switzerland. Units: *m*
"""
LV03_EAST_MAX = 850_000.0

# Projection origin (old observatory of Bern)

"""
LV03 northing of the projection origin. Units: *m*
"""
LV03_NORTH_ORIGIN = 200_000.0

"""
LV03 easting of the projection origin. Units: *m*
"""
LV03_EAST_ORIGIN = 600_000.0

"""
WGS84 latitude of the projection origin. Units: *arcsec*

References:

1. swisstopo, *Approximate formulas for the transformation between Swiss
   projection coordinates and WGS84*, 2016
"""
LAT_ORIGIN_AS = 169_028.66

"""
WGS84 longitude of the projection origin. Units: *arcsec*
"""
LON_ORIGIN_AS = 26_782.5

"""
Scale of the auxiliary projection units. Units: *m* per unit
"""
AUX_SCALE = 1_000_000.0
