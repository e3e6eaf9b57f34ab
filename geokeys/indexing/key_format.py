# geokeys/indexing/key_format.py
"""
Index Key Format Specifications
===============================

This module documents the integer key layouts shared by the index builder,
the index reader and the relevance scorer. Every layout is parameterized by
an EncodingScheme (see geokeys/config.py); the bit widths below are those of
SCHEME_V2, the default. SCHEME_V1 differs only where noted.


TermID (uint32)
---------------

    Bits    Description
    31..4   FNV-1a 32 hash of the token's UTF-8 bytes (top 28 bits)
    3..0    Zero. Reserved for a weight or a degenerate distance.

    terms(["foo"]) -> 0xA9F37ED0 (2851307216)
    fnv1a32(b"foo") -> 0xA9F37ED7

SCHEME_V1 reserves 2 low bits instead of 4.


Weighted TermID (uint32)
------------------------

    Bits    Description
    31..4   TermID base
    3..0    Weight 0..15, higher is more important

Sorted with sort_weighted(): heaviest first.


Degenerate pair (uint32, uint32)
--------------------------------

degens(term) emits interleaved (key, value) pairs, one per prefix of the
term, from the full term down to its first two characters or until the
distance field is exhausted (15 removed characters under SCHEME_V2):

    key     TermID of the prefix            (lookup key in the index)
    value   TermID of the full term | d     (d = characters removed)

For "foobarbaz":

    prefix      key             value
    foobarbaz   1617781328      1617781328  (d=0)
    foobarba    4112850176      1617781329  (d=1)
    foobarb     2921073328      1617781330  (d=2)
    ...
    fo          TermID("fo")    1617781335  (d=7)

Sorted with sort_degens(): nearest variant (smallest d) first.


PhraseID (uint32)
-----------------

SCHEME_V2, cluster field on the top byte:

    Bits    Description
    31..24  Top byte of the phrase's first TermID (cluster field)
    23..0   Low 24 bits of FNV-1a 32 over every TermID (little-endian uint32)

    phrase(terms(["foo", "street"])) >> 24 == 0xA9 == terms(["foo"])[0] >> 24

SCHEME_V1, cluster field on the low 12 bits:

    Bits    Description
    31..12  Top 20 bits of the phrase body hash
    11..0   (first TermID >> 2) % 4096

Sorting by PhraseID under SCHEME_V2 keeps every phrase sharing a first term
contiguous; under SCHEME_V1 the same holds after grouping by id % 4096.


TileID (uint64)
---------------

    x * 2^39 + y * 2^25 + local_id

    Field       Width   Range
    x           25 bits tile column at z14 (z is implied by the source)
    y           14 bits tile row at z14
    local_id    25 bits per-tile feature ID

Computed with unsigned 64-bit wraparound. Nothing is range checked: an
oversize local_id bleeds into y, an oversize y into x.


Shard
-----

    shard(level, key) = key >> (32 - 4 * level)

Level 2 uses the top byte, which under SCHEME_V2 is exactly the phrase
cluster field.


Grid codes
----------

Grid values are stored as single characters starting at 32 (space) and
skipping 35 ('#') and 93 (']'). resolve_code() maps them back to 0-based
integers.
"""
