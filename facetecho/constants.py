# -*- coding: utf-8 -*-
"""
Physical Constants - Constants shared by the geometry and timing models.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""

#: Speed of light in vacuum (meters per second)
SPEED_OF_LIGHT = 299792458.0  # m/s

#: Mean Earth radius used for the curvature corrections (meters)
EARTH_RADIUS = 6371.0e3  # m
