# geokeys/indexing/sorters.py
"""
Comparators used by the index builder when writing sorted postings.
"""
from functools import cmp_to_key, partial
from typing import Iterable, List

import numpy as np

from geokeys.config import DEFAULT_SCHEME, EncodingScheme

def sort_degens(a: int, b: int, scheme: EncodingScheme = DEFAULT_SCHEME) -> int:
    """Order degenerate IDs by distance from the original term, then by ID."""
    ad = a % scheme.distance_modulus
    bd = b % scheme.distance_modulus
    if ad < bd:
        return -1
    if ad > bd:
        return 1
    return -1 if a < b else 1 if a > b else 0

def sort_weighted(a: int, b: int, scheme: EncodingScheme = DEFAULT_SCHEME) -> int:
    """Order weighted term IDs heaviest first."""
    aw = a % scheme.distance_modulus
    bw = b % scheme.distance_modulus
    return -1 if aw > bw else 1 if aw < bw else 0

def sorted_degens(ids: Iterable[int], scheme: EncodingScheme = DEFAULT_SCHEME) -> List[int]:
    return sorted(ids, key=cmp_to_key(partial(sort_degens, scheme=scheme)))

def sorted_weighted(ids: Iterable[int], scheme: EncodingScheme = DEFAULT_SCHEME) -> List[int]:
    # sorted() is stable, so equal weights keep their input order
    return sorted(ids, key=cmp_to_key(partial(sort_weighted, scheme=scheme)))

def argsort_degens(ids, scheme: EncodingScheme = DEFAULT_SCHEME) -> np.ndarray:
    """
    Bulk version of sort_degens for large posting arrays.

    Args:
        ids: Array-like of uint32 degenerate IDs

    Returns:
        Indices that put ids in sort_degens order
    """
    values = np.asarray(ids, dtype=np.uint32)
    distances = values & np.uint32(scheme.max_distance)
    # lexsort uses the last key as the primary one
    return np.lexsort((values, distances))
