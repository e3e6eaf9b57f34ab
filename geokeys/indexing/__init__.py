# geokeys/indexing/__init__.py
"""
Indexing Package
"""
from .tokenizer import TransliterationTable, DEFAULT_TABLE, normalize_token, tokenize
from .term_hasher import fnv1a32, term_id, terms, terms_map, encode_weight
from .degenerates import degens
from .phrase_encoder import phrase, phrase_from_tokens
from .sorters import sort_degens, sort_weighted, sorted_degens, sorted_weighted, argsort_degens
from .sharding import shard
from .lexicon import TermLexicon

__all__ = [
    'TransliterationTable',
    'DEFAULT_TABLE',
    'normalize_token',
    'tokenize',
    'fnv1a32',
    'term_id',
    'terms',
    'terms_map',
    'encode_weight',
    'degens',
    'phrase',
    'phrase_from_tokens',
    'sort_degens',
    'sort_weighted',
    'sorted_degens',
    'sorted_weighted',
    'argsort_degens',
    'shard',
    'TermLexicon'
]
