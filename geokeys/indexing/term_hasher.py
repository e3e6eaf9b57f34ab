# geokeys/indexing/term_hasher.py
"""
Term Hasher
===========
Maps normalized tokens to stable 32-bit term IDs.
IDs are persisted in index files, so the hash must never change
between releases (see key_format.py for the layout).
"""
import logging
from typing import Dict, Iterable, List

from geokeys.config import DEFAULT_SCHEME, UINT32_MASK, EncodingScheme

logger = logging.getLogger(__name__)

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193

def fnv1a32(data: bytes) -> int:
    """32-bit FNV-1a hash of a byte string."""
    h = FNV_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV_PRIME) & UINT32_MASK
    return h

def term_id(token: str, scheme: EncodingScheme = DEFAULT_SCHEME) -> int:
    """Hash a single token, clearing the reserved low field."""
    return fnv1a32(token.encode("utf-8")) & scheme.base_mask

def terms(tokens: Iterable[str], scheme: EncodingScheme = DEFAULT_SCHEME) -> List[int]:
    """Hash tokens into term IDs, preserving input order."""
    return [term_id(token, scheme) for token in tokens]

def terms_map(tokens: Iterable[str], scheme: EncodingScheme = DEFAULT_SCHEME) -> Dict[int, str]:
    """
    Build a term ID → token mapping.

    When two distinct tokens hash to the same ID the first one seen is
    kept and the collision is logged; later tokens never overwrite it.
    """
    mapping = {}
    for token in tokens:
        tid = term_id(token, scheme)
        existing = mapping.get(tid)
        if existing is None:
            mapping[tid] = token
        elif existing != token:
            logger.warning(
                f"Term ID collision: {token!r} and {existing!r} both hash to {tid}; keeping {existing!r}"
            )
    return mapping

def encode_weight(tid: int, weight: int, scheme: EncodingScheme = DEFAULT_SCHEME) -> int:
    """
    Write a weight into the low field of a term ID.

    Weights are clamped to 0..scheme.max_distance.
    """
    weight = max(0, min(int(weight), scheme.max_distance))
    return (tid & scheme.base_mask) | weight
