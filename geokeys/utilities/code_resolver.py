# geokeys/utilities/code_resolver.py
from geokeys.config import CODE_OFFSET, RESERVED_CODES

def resolve_code(key: int) -> int:
    """
    Resolve a character code stored in a grid to its plain number value.

    Grid codes start at 32 and skip the reserved values 35 and 93, so the
    ranges above each reserved value are shifted down by one (highest first)
    before removing the offset. Inputs outside the encoded range give
    meaningless results rather than errors.
    """
    for reserved in sorted(RESERVED_CODES, reverse=True):
        if key >= reserved:
            key -= 1
    return key - CODE_OFFSET

def encode_code(value: int) -> int:
    """Inverse of resolve_code for non-negative values."""
    key = value + CODE_OFFSET
    for reserved in sorted(RESERVED_CODES):
        if key >= reserved:
            key += 1
    return key
