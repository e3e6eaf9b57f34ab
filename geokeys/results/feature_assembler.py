# geokeys/results/feature_assembler.py
"""
Feature Assembler
=================
Turns a chain of matched index records into a GeoJSON-like feature.

A context lists records from most specific (index 0, the feature itself)
to least specific (eg. street → city → country). The aggregate relevance
belongs to the context as a whole, not to any single record.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

logger = logging.getLogger(__name__)

# Legacy index document keys; everything without the prefix is a property
_INDEX_DOC_FIELDS = {
    "_center": "center",
    "_extid": "external_id",
    "_text": "text",
    "_geometry": "geometry",
    "_bbox": "bbox",
    "_address": "address",
}


class ValidationError(ValueError):
    """A match record is missing a field required to build a feature."""
    pass


@dataclass
class MatchRecord:
    """One matched place at one level of specificity."""
    center: Optional[List[float]] = None
    external_id: Optional[str] = None
    text: Optional[str] = None  # Comma-joined synonyms, canonical name first
    geometry: Optional[Dict[str, Any]] = None
    bbox: Optional[List[float]] = None
    address: Optional[str] = None
    properties: Dict[str, Any] = field(default_factory=dict)

    @property
    def display_text(self) -> str:
        """Canonical (first) synonym."""
        return self.text.split(",")[0]

    @classmethod
    def from_index_doc(cls, doc: Mapping[str, Any]) -> "MatchRecord":
        """
        Convert an index document like {"_extid": ..., "_text": ..., "name:en": ...}.

        Underscore-prefixed keys other than the known ones are dropped.
        """
        known = {}
        properties = {}
        for key, value in doc.items():
            if key in _INDEX_DOC_FIELDS:
                known[_INDEX_DOC_FIELDS[key]] = value
            elif not key.startswith("_"):
                properties[key] = value
        return cls(properties=properties, **known)


@dataclass
class SearchContext:
    """Matched records, most specific first, with their aggregate relevance."""
    records: List[MatchRecord]
    relevance: Optional[float] = None


def _as_record(record: Union[MatchRecord, Mapping[str, Any]]) -> MatchRecord:
    if isinstance(record, MatchRecord):
        return record
    return MatchRecord.from_index_doc(record)

def _as_context(context) -> SearchContext:
    if isinstance(context, SearchContext):
        return SearchContext([_as_record(r) for r in context.records], context.relevance)
    return SearchContext([_as_record(r) for r in context])

def to_feature(context: Union[SearchContext, Sequence[Any]]) -> Dict[str, Any]:
    """
    Reformat a context into a GeoJSON feature.

    Args:
        context: SearchContext, or a plain sequence of MatchRecords or
            index documents (relevance is then None)

    Returns:
        Feature dict with id, type, text, place_name, geometry, center,
        relevance, properties and, where present, bbox, address and context

    Raises:
        ValidationError: If the primary record lacks center, external_id
            or text, or a context record lacks external_id or text
    """
    context = _as_context(context)
    if not context.records:
        raise ValidationError("Context has no records")

    feat = context.records[0]
    for name in ("center", "external_id", "text"):
        if not getattr(feat, name):
            raise ValidationError(f"Feature has no {name}")
    # Check parents before any synonym is split for place_name
    for record in context.records[1:]:
        if not record.external_id:
            raise ValidationError("Context feature has no external_id")
        if not record.text:
            raise ValidationError("Context feature has no text")

    feature = {
        "id": feat.external_id,
        "type": "Feature",
        "text": feat.display_text,
        "place_name": (feat.address + " " if feat.address else "")
            + ", ".join(r.display_text for r in context.records),
        "geometry": feat.geometry or {
            "type": "Point",
            "coordinates": feat.center,
        },
        "relevance": context.relevance,
    }
    # A polygon's stored center is its label point, not its centroid
    if feat.geometry and feat.geometry.get("type") == "Point":
        feature["center"] = feat.geometry["coordinates"]
    else:
        feature["center"] = feat.center
    if feat.bbox:
        feature["bbox"] = feat.bbox
    if feat.address:
        feature["address"] = feat.address
    feature["properties"] = dict(feat.properties)

    if len(context.records) > 1:
        feature["context"] = []
        for record in context.records[1:]:
            feature["context"].append({
                "id": record.external_id,
                "text": record.display_text,
            })

    logger.debug(f"Assembled feature {feature['id']} with {len(context.records)} records")
    return feature
