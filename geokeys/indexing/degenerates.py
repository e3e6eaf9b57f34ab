# geokeys/indexing/degenerates.py
"""
Degenerate term generation for prefix and typo-tolerant lookup.
"""
from typing import List

from geokeys.config import DEFAULT_SCHEME, EncodingScheme
from geokeys.indexing.term_hasher import term_id

def degens(term: str, scheme: EncodingScheme = DEFAULT_SCHEME) -> List[int]:
    """
    Generate degenerate IDs for a term.

    Each prefix of the term, starting with the term itself and removing
    one trailing character at a time, yields a (key, value) pair:
    the key is the prefix's term ID and the value is the full term's ID
    with the number of removed characters in its low field. Prefixes stop
    at two characters or when the distance field is full.

    Args:
        term: A single normalized token
        scheme: Key layout to encode with

    Returns:
        Flat list [key0, value0, key1, value1, ...] of
        2 * min(len(term) - 1, scheme.max_distance) integers
    """
    if not isinstance(term, str):
        raise TypeError(f"Expected a string term, got {type(term).__name__}")
    if not term:
        return []

    base = term_id(term, scheme)
    count = min(len(term) - 1, scheme.max_distance)

    encoded = []
    for distance in range(count):
        prefix = term[:len(term) - distance]
        encoded.append(term_id(prefix, scheme))
        encoded.append(base | distance)
    return encoded
