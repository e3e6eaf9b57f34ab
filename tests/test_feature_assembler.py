from typing import Callable

import pytest

from geokeys.results.feature_assembler import (
    MatchRecord,
    SearchContext,
    ValidationError,
    to_feature,
)

RecordFactory = Callable[..., MatchRecord]


@pytest.fixture
def street(make_record: RecordFactory) -> MatchRecord:
    return make_record(
        external_id="address.1",
        text="Main Street,Main St",
        center=[6.86, 45.92],
        address="12",
        geometry={"type": "Point", "coordinates": [6.861, 45.921]},
        properties={"postcode": "74400"},
    )


def test_single_record_feature(make_record: RecordFactory) -> None:
    feature = to_feature(SearchContext([make_record()], relevance=0.9))
    assert feature == {
        "id": "place.1",
        "type": "Feature",
        "text": "Chamonix",
        "place_name": "Chamonix",
        "geometry": {"type": "Point", "coordinates": [6.8694, 45.9237]},
        "center": [6.8694, 45.9237],
        "relevance": 0.9,
        "properties": {},
    }


def test_full_context_feature(make_record: RecordFactory, street: MatchRecord) -> None:
    context = SearchContext(
        [street, make_record(), make_record("country.1", "France", [2.0, 46.0])],
        relevance=0.75,
    )
    feature = to_feature(context)
    assert feature["id"] == "address.1"
    assert feature["text"] == "Main Street"
    assert feature["place_name"] == "12 Main Street, Chamonix, France"
    assert feature["address"] == "12"
    assert feature["center"] == [6.861, 45.921]
    assert feature["properties"] == {"postcode": "74400"}
    assert feature["context"] == [
        {"id": "place.1", "text": "Chamonix"},
        {"id": "country.1", "text": "France"},
    ]
    assert feature["relevance"] == 0.75


def test_polygon_keeps_stored_center(make_record: RecordFactory) -> None:
    polygon = {"type": "Polygon", "coordinates": [[[0, 0], [4, 0], [4, 4], [0, 0]]]}
    record = make_record(center=[1.0, 1.0], geometry=polygon, bbox=[0, 0, 4, 4])
    feature = to_feature([record])
    assert feature["geometry"] == polygon
    assert feature["center"] == [1.0, 1.0]
    assert feature["bbox"] == [0, 0, 4, 4]


def test_properties_are_a_shallow_copy(make_record: RecordFactory) -> None:
    record = make_record(properties={"wikidata": "Q1"})
    feature = to_feature([record])
    feature["properties"]["wikidata"] = "Q2"
    assert record.properties == {"wikidata": "Q1"}


def test_plain_sequence_has_no_relevance(make_record: RecordFactory) -> None:
    assert to_feature([make_record()])["relevance"] is None


def test_context_omitted_for_single_record(make_record: RecordFactory) -> None:
    assert "context" not in to_feature([make_record()])


@pytest.mark.parametrize("missing", ["center", "external_id", "text"])
def test_primary_record_requires_field(make_record: RecordFactory, missing: str) -> None:
    record = make_record()
    setattr(record, missing, None)
    with pytest.raises(ValidationError):
        to_feature([record])


def test_record_with_only_text_is_rejected() -> None:
    with pytest.raises(ValidationError):
        to_feature([MatchRecord(text="Chamonix")])


@pytest.mark.parametrize("missing", ["external_id", "text"])
def test_context_record_requires_field(make_record: RecordFactory, missing: str) -> None:
    parent = make_record("country.1", "France")
    setattr(parent, missing, None)
    with pytest.raises(ValidationError):
        to_feature([make_record(), parent])


def test_context_record_does_not_need_center(make_record: RecordFactory) -> None:
    parent = MatchRecord(external_id="country.1", text="France")
    assert to_feature([make_record(), parent])["context"] == [{"id": "country.1", "text": "France"}]


def test_empty_context_is_rejected() -> None:
    with pytest.raises(ValidationError):
        to_feature([])


def test_validation_error_is_value_error() -> None:
    assert issubclass(ValidationError, ValueError)


def test_from_index_doc_maps_legacy_fields() -> None:
    record = MatchRecord.from_index_doc({
        "_extid": "place.7",
        "_text": "Paris,Lutece",
        "_center": [2.35, 48.85],
        "_bbox": [2.2, 48.8, 2.5, 48.9],
        "_score": 12,
        "name:fr": "Paris",
    })
    assert record.external_id == "place.7"
    assert record.text == "Paris,Lutece"
    assert record.center == [2.35, 48.85]
    assert record.bbox == [2.2, 48.8, 2.5, 48.9]
    assert record.properties == {"name:fr": "Paris"}


def test_to_feature_accepts_index_docs() -> None:
    docs = [
        {"_extid": "place.7", "_text": "Paris", "_center": [2.35, 48.85], "population": 2100000},
        {"_extid": "country.1", "_text": "France"},
    ]
    feature = to_feature(SearchContext(docs, relevance=1.0))
    assert feature["place_name"] == "Paris, France"
    assert feature["properties"] == {"population": 2100000}
    assert feature["relevance"] == 1.0


def test_parent_without_text_raises_validation_error(make_record: RecordFactory) -> None:
    parent = MatchRecord(external_id="country.1")
    with pytest.raises(ValidationError, match="no text"):
        to_feature([make_record(), parent])


def test_index_doc_parent_without_text_raises_validation_error() -> None:
    docs = [
        {"_extid": "place.7", "_text": "Paris", "_center": [2.35, 48.85]},
        {"_extid": "country.1"},
    ]
    with pytest.raises(ValidationError):
        to_feature(docs)
