from .grids import FrequencyGrid, PowerAccumulator, validate_resolution
from .points import as_point_set

__all__ = [
    "FrequencyGrid",
    "PowerAccumulator",
    "validate_resolution",
    "as_point_set",
]
