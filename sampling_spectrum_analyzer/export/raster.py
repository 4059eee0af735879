"""Single-channel floating-point OpenEXR rasters.

Power grids are written as one ``Y`` channel of 32-bit floats, row 0 at the top,
so the DC cell ends up in the middle of the image.
"""

from __future__ import annotations

from pathlib import Path

import Imath
import numpy as np
import OpenEXR


GREY_CHANNEL = "Y"
_FLOAT = Imath.PixelType(Imath.PixelType.FLOAT)


def write_exr_grey(path: str | Path, grid: np.ndarray, x_res: int, y_res: int) -> None:
    """Write ``grid`` (``x_res * y_res`` values, row-major) as a grey FLOAT EXR."""
    x_res = int(x_res)
    y_res = int(y_res)
    data = np.asarray(grid, dtype=np.float32)
    if data.size != x_res * y_res:
        raise ValueError(f"raster has {data.size} values, expected {x_res}x{y_res}={x_res * y_res}")

    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    header = OpenEXR.Header(x_res, y_res)
    header["channels"] = {GREY_CHANNEL: Imath.Channel(_FLOAT)}

    out = OpenEXR.OutputFile(str(out_path), header)
    try:
        out.writePixels({GREY_CHANNEL: np.ascontiguousarray(data.reshape(y_res, x_res)).tobytes()})
    finally:
        out.close()


def read_exr_grey(path: str | Path) -> np.ndarray:
    """Read a grey EXR written by :func:`write_exr_grey` as a ``(y_res, x_res)`` float32 array."""
    f = OpenEXR.InputFile(str(path))
    try:
        dw = f.header()["dataWindow"]
        x_res = dw.max.x - dw.min.x + 1
        y_res = dw.max.y - dw.min.y + 1
        raw = f.channel(GREY_CHANNEL, _FLOAT)
    finally:
        f.close()
    return np.frombuffer(raw, dtype=np.float32).reshape(y_res, x_res)
