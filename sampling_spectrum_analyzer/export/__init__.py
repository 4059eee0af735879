"""Artifact writers: grey EXR rasters and radial mean text tables."""

from .naming import padded_trial_index, radial_filename, raster_filename
from .radial_table import load_radial_mean_txt, write_radial_mean_txt
from .raster import read_exr_grey, write_exr_grey

__all__ = [
    "padded_trial_index",
    "radial_filename",
    "raster_filename",
    "load_radial_mean_txt",
    "write_radial_mean_txt",
    "read_exr_grey",
    "write_exr_grey",
]
