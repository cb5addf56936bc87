"""Shared EDSM connector constants.

This module centralizes URLs and the reference probe so the REST
connector and the endpoint definitions stay small and focused.
"""

from __future__ import annotations

from planetstat.core.geometry import Vec3

BASE_URL = "https://www.edsm.net"

CUBE_SYSTEMS_PATH = "/api-v1/cube-systems"
BODIES_PATH = "/api-system-v1/bodies"

# Largest cube edge the cube-systems endpoint accepts
MAX_CUBE_SIZE = 200

# Reference query that always returns systems (the Sol neighbourhood).
# An empty answer here means the API is throttling us.
PROBE_CENTER = Vec3(0.0, 0.0, 0.0)
PROBE_SIZE = 20.0

USER_AGENT = "planetstat/0.1 (+https://www.edsm.net/en/api-v1)"

DEFAULT_TIMEOUT = 30.0
