# geokeys/indexing/lexicon.py
"""
Term Lexicon
============
Persisted vocabulary mapping tokens to term IDs.
Backed by a MARISA RecordTrie so the index reader can expand a typed
prefix into every known token (and its term ID) without a full scan.
"""
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

import marisa_trie

from geokeys.config import DEFAULT_SCHEME, EncodingScheme
from geokeys.indexing.term_hasher import term_id

logger = logging.getLogger(__name__)


class TermLexicon:
    """Read-only token → term ID dictionary."""

    # One little-endian uint32 per token
    RECORD_FORMAT = "<I"

    def __init__(self, trie: marisa_trie.RecordTrie, scheme: EncodingScheme = DEFAULT_SCHEME):
        self.trie = trie
        self.scheme = scheme

    @classmethod
    def build(cls, tokens: Iterable[str], scheme: EncodingScheme = DEFAULT_SCHEME) -> "TermLexicon":
        """Build a lexicon from tokens; duplicates are stored once."""
        unique = dict.fromkeys(token for token in tokens if token)
        records = [(token, (term_id(token, scheme),)) for token in unique]
        logger.debug(f"Building lexicon with {len(records):,} tokens")
        return cls(marisa_trie.RecordTrie(cls.RECORD_FORMAT, records), scheme)

    @classmethod
    def load(cls, path: Union[str, Path], scheme: EncodingScheme = DEFAULT_SCHEME) -> "TermLexicon":
        """Load a lexicon written by save()."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Lexicon file not found: {path}")
        # RecordTrie needs its format string even when loading from file
        trie = marisa_trie.RecordTrie(cls.RECORD_FORMAT)
        trie.load(str(path))
        return cls(trie, scheme)

    def save(self, path: Union[str, Path]):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.trie.save(str(path))

    def lookup(self, token: str) -> Optional[int]:
        """Return the term ID for token, or None if it isn't in the lexicon."""
        if token not in self.trie:
            return None
        # RecordTrie returns a list of tuples like [(tid,)]
        return self.trie[token][0][0]

    def ids_with_prefix(self, prefix: str) -> Dict[str, int]:
        """Return every token starting with prefix, mapped to its term ID."""
        return {token: record[0] for token, record in self.trie.items(prefix)}

    def __contains__(self, token: str) -> bool:
        return token in self.trie

    def __len__(self) -> int:
        return len(self.trie)
