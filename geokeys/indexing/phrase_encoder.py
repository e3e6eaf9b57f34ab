# geokeys/indexing/phrase_encoder.py
import struct
from typing import Iterable, Sequence

from geokeys.config import DEFAULT_SCHEME, UINT32_MASK, EncodingScheme
from geokeys.indexing.term_hasher import fnv1a32, terms

def phrase(term_ids: Sequence[int], scheme: EncodingScheme = DEFAULT_SCHEME) -> int:
    """
    Combine an ordered list of term IDs into one phrase ID.

    The cluster field depends only on the first term, so an index sorted
    by phrase ID keeps every phrase with the same leading word together.
    The rest of the ID hashes the whole sequence.
    """
    if not term_ids:
        raise ValueError("Cannot build a phrase ID from an empty term list")

    body = fnv1a32(b"".join(struct.pack("<I", tid & UINT32_MASK) for tid in term_ids))
    first = term_ids[0] & UINT32_MASK
    mask = scheme.cluster_mask

    if scheme.cluster_high:
        cluster = first & mask
    else:
        cluster = (first >> scheme.distance_bits) & mask
    return (body & (UINT32_MASK ^ mask)) | cluster

def phrase_from_tokens(tokens: Iterable[str], scheme: EncodingScheme = DEFAULT_SCHEME) -> int:
    """Hash tokens and encode them as a phrase."""
    return phrase(terms(tokens, scheme), scheme)
