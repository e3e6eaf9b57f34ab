# geokeys/spatial/tile_coder.py
"""
Tile coordinate packing.

Converts a local feature ID plus its z/x/y tile into one spatial index key.
z is omitted as it can be derived from the source's maxzoom metadata.
x and y are encoded as multiples of 2^39 and 2^25 (making z14 the maximum
zoom level), leaving 2^25 distinct values for local IDs.
"""
import logging
from typing import Tuple

import numpy as np

from geokeys.config import LOCAL_ID_BITS, TILE_X_SHIFT, TILE_Y_SHIFT, UINT64_MASK

logger = logging.getLogger(__name__)

# Cached multipliers
_X_MULTIPLIER = np.uint64(1 << TILE_X_SHIFT)
_Y_MULTIPLIER = np.uint64(1 << TILE_Y_SHIFT)
_LOCAL_ID_LIMIT = 1 << LOCAL_ID_BITS

def _coerce_int(segment: str) -> int:
    """
    Parse a tile segment as an integer, defaulting to 0.

    Decimal only: "3.7" truncates to 3 but hex like "0x10" gives 0, and
    values are not wrapped to 32 bits before packing.
    """
    try:
        return int(segment)
    except ValueError:
        pass
    try:
        return int(float(segment))
    except (ValueError, OverflowError):
        return 0

def zxy(local_id: int, tile: str) -> int:
    """
    Pack a local feature ID and a "z/x/y" tile into a tile ID.

    Args:
        local_id: Per-tile feature ID, expected below 2^25
        tile: Tile name like "14/3/5"; non-numeric x or y count as 0

    Returns:
        x * 2^39 + y * 2^25 + local_id, wrapped to 64 bits
    """
    parts = tile.split("/")
    x = _coerce_int(parts[1]) if len(parts) > 1 else 0
    y = _coerce_int(parts[2]) if len(parts) > 2 else 0

    if not 0 <= local_id < _LOCAL_ID_LIMIT:
        logger.debug(f"Local ID {local_id} exceeds {LOCAL_ID_BITS} bits in tile {tile}")

    with np.errstate(over="ignore"):
        packed = (
            np.uint64(x & UINT64_MASK) * _X_MULTIPLIER
            + np.uint64(y & UINT64_MASK) * _Y_MULTIPLIER
            + np.uint64(local_id & UINT64_MASK)
        )
    return int(packed)

def decode_zxy(tile_id: int) -> Tuple[int, int, int]:
    """
    Split a tile ID back into (x, y, local_id).

    Only meaningful for IDs whose fields stayed within their widths.
    """
    tile_id &= UINT64_MASK
    x = tile_id >> TILE_X_SHIFT
    y = (tile_id >> TILE_Y_SHIFT) & ((1 << (TILE_X_SHIFT - TILE_Y_SHIFT)) - 1)
    local_id = tile_id & (_LOCAL_ID_LIMIT - 1)
    return x, y, local_id
