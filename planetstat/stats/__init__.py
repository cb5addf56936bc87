"""Statistics derived from fetched systems."""

from .star_types import count_by, primary_star_types, short_type
from .survey import PlanetRow, is_terraform_candidate, survey_planets

__all__ = [
    "PlanetRow",
    "count_by",
    "is_terraform_candidate",
    "primary_star_types",
    "short_type",
    "survey_planets",
]
