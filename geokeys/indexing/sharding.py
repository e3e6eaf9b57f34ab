# geokeys/indexing/sharding.py
from geokeys.config import UINT32_MASK

MAX_SHARD_LEVEL = 8
BITS_PER_LEVEL = 4

def shard(level: int, key: int) -> int:
    """
    Return the shard a 32-bit key belongs to.

    Each level adds 4 bits taken from the top of the key; level 0 puts
    everything in shard 0.
    """
    if not 0 <= level <= MAX_SHARD_LEVEL:
        raise ValueError(f"Shard level must be between 0 and {MAX_SHARD_LEVEL}, got {level}")
    return (key & UINT32_MASK) >> (32 - level * BITS_PER_LEVEL)
