# geokeys/__init__.py
"""
geokeys
=======
Key encodings for a geocoding index: tokens, term IDs, degenerate
terms, phrase IDs, tile IDs, and the features rebuilt from matches.
"""
from .config import VERSION, EncodingScheme, SCHEME_V1, SCHEME_V2, DEFAULT_SCHEME, get_scheme
from .indexing import (
    TransliterationTable,
    tokenize,
    terms,
    terms_map,
    degens,
    phrase,
    sort_degens,
    sort_weighted,
    shard,
    TermLexicon
)
from .spatial import zxy, decode_zxy
from .results import MatchRecord, SearchContext, ValidationError, to_feature
from .utilities import resolve_code

__version__ = VERSION

__all__ = [
    'EncodingScheme',
    'SCHEME_V1',
    'SCHEME_V2',
    'DEFAULT_SCHEME',
    'get_scheme',
    'TransliterationTable',
    'tokenize',
    'terms',
    'terms_map',
    'degens',
    'phrase',
    'sort_degens',
    'sort_weighted',
    'shard',
    'TermLexicon',
    'zxy',
    'decode_zxy',
    'MatchRecord',
    'SearchContext',
    'ValidationError',
    'to_feature',
    'resolve_code'
]
