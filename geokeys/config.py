# geokeys/config.py
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

def _get_version():
    """Read geokeys' version from pyproject.toml"""
    try:
        pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
        return data["project"]["version"]
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        return "unknown"  # Fallback if pyproject.toml is missing

VERSION = _get_version()

# Fixed-width integer masks
UINT32_MASK = 0xFFFFFFFF
UINT64_MASK = 0xFFFFFFFFFFFFFFFF

# Tile ID layout: x * 2^39 + y * 2^25 + local_id (z14 is the maximum zoom)
MAX_ZOOM = 14
TILE_X_SHIFT = 39
TILE_Y_SHIFT = 25
LOCAL_ID_BITS = 25

# Byte values skipped by the grid code encoding, checked in this order
RESERVED_CODES = (93, 35)
CODE_OFFSET = 32


@dataclass(frozen=True)
class EncodingScheme:
    """
    One version of the index key bit layout.

    Every encoder takes a scheme so that a layout change never touches
    call sites. The builder and the reader of an index must use the same
    version.

    Attributes:
        version: Scheme version number
        distance_bits: Width of the low field holding a degenerate
            distance or a term weight
        cluster_bits: Width of the phrase cluster field
        cluster_high: True if the cluster field is the top of the ID
            (``id >> (32 - cluster_bits)``), False for the bottom
            (``id % 2**cluster_bits``)
    """
    version: int
    distance_bits: int
    cluster_bits: int
    cluster_high: bool

    @property
    def distance_modulus(self) -> int:
        return 1 << self.distance_bits

    @property
    def max_distance(self) -> int:
        return self.distance_modulus - 1

    @property
    def base_mask(self) -> int:
        """Mask that clears the distance/weight field."""
        return UINT32_MASK ^ self.max_distance

    @property
    def cluster_mask(self) -> int:
        """Mask selecting the cluster field in place."""
        width = (1 << self.cluster_bits) - 1
        if self.cluster_high:
            return width << (32 - self.cluster_bits)
        return width

    def cluster_of(self, phrase_id: int) -> int:
        """Extract the cluster field of a phrase ID as a small integer."""
        if self.cluster_high:
            return (phrase_id & UINT32_MASK) >> (32 - self.cluster_bits)
        return phrase_id % (1 << self.cluster_bits)


# Early fixtures: 2-bit distances, phrases clustered on the low 12 bits
SCHEME_V1 = EncodingScheme(version=1, distance_bits=2, cluster_bits=12, cluster_high=False)
# Current layout: 4-bit distances (max 15), phrases clustered on the top byte
SCHEME_V2 = EncodingScheme(version=2, distance_bits=4, cluster_bits=8, cluster_high=True)

SCHEMES = {
    SCHEME_V1.version: SCHEME_V1,
    SCHEME_V2.version: SCHEME_V2,
}

DEFAULT_SCHEME = SCHEME_V2

def get_scheme(version: int) -> EncodingScheme:
    """Look up an encoding scheme by version number."""
    try:
        return SCHEMES[version]
    except KeyError:
        raise ValueError(f"Unknown encoding scheme version: {version}") from None


class PathConfig:
    BASE_DIR = Path.home() / ".geokeys"

    @classmethod
    def get_config_path(cls):
        override = os.environ.get("GEOKEYS_CONFIG")
        if override:
            return Path(override)
        return cls.BASE_DIR / "config.json"
