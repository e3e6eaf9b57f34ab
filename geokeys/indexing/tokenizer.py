# geokeys/indexing/tokenizer.py
"""
Query Tokenizer
===============
Deterministic tokenization for place names.
Used by the index builder to produce terms and phrases, and by the
query path to turn user input into the same tokens.
"""
import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Union

import unidecode

logger = logging.getLogger(__name__)

# "<lon>,<lat>" with optional surrounding whitespace and signed decimals
_LONLAT_PATTERN = re.compile(
    r"^\s*([-+]?(?:\d+\.?\d*|\.\d+))\s*,\s*([-+]?(?:\d+\.?\d*|\.\d+))\s*$"
)
# Anything that isn't an ASCII letter or digit separates tokens
_SEPARATOR_PATTERN = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True, eq=False)
class TransliterationTable:
    """
    Immutable transliteration rules applied before tokenization.

    Overrides map single characters to Latin replacements and win over
    the unidecode fallback (eg. {"ä": "ae"} instead of unidecode's "a").
    Build one at process start and pass it by reference.
    """
    overrides: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        for char in self.overrides:
            if len(char) != 1:
                raise ValueError(f"Override keys must be single characters, got {char!r}")
        # Private read-only copy of the caller's mapping
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))
        object.__setattr__(
            self, "_translation", {ord(k): v for k, v in self.overrides.items()}
        )

    def transliterate(self, text: str) -> str:
        """Fold text to ASCII, applying overrides first."""
        if self.overrides:
            text = text.translate(self._translation)
        return unidecode.unidecode(text)


DEFAULT_TABLE = TransliterationTable()

def normalize_token(text: str, table: TransliterationTable = DEFAULT_TABLE) -> str:
    """
    Normalize text for tokenization.

    This function prepares text for tokenization by:
    - Converting to lowercase
    - Transliterating to ASCII (eg. "Москва" → "moskva", "京都市" → "jing du shi")
    - Replacing punctuation, hyphens and underscores with spaces
    - Collapsing runs of separators into single spaces

    Args:
        text: Input text string to normalize
        table: Transliteration rules to apply

    Returns:
        Normalized text string ready for splitting
    """
    if not text:
        return ""

    # Lowercase before and after folding: overrides are keyed on lowercase
    # characters and unidecode can emit capitals ("京" → "Jing ")
    text = table.transliterate(text.lower()).lower()
    text = _SEPARATOR_PATTERN.sub(" ", text)

    return text.strip()

def parse_lonlat(text: str) -> Union[List[float], None]:
    """Return [lon, lat] if text is a coordinate pair, else None."""
    match = _LONLAT_PATTERN.match(text)
    if not match:
        return None
    return [float(match.group(1)), float(match.group(2))]

def tokenize(text: str, coerce_numeric: bool = False,
             table: TransliterationTable = DEFAULT_TABLE) -> Union[List[str], List[float]]:
    """
    Split text into normalized tokens.

    Args:
        text: Free-text input, eg. a place name or a user query
        coerce_numeric: If True and text is a "<lon>,<lat>" pair, return
            the two numbers instead of tokens
        table: Transliteration rules to apply

    Returns:
        List of tokens, or [lon, lat] for coordinate input
    """
    if not text:
        return []

    if coerce_numeric:
        lonlat = parse_lonlat(text)
        if lonlat is not None:
            logger.debug(f"Treating {text!r} as coordinates {lonlat}")
            return lonlat

    normalized = normalize_token(text, table)
    if not normalized:
        return []

    return normalized.split()
