import pytest

from geokeys.config import SCHEME_V2
from geokeys.indexing.phrase_encoder import phrase
from geokeys.indexing.sharding import shard
from geokeys.indexing.term_hasher import terms


def test_shard_uses_top_bits() -> None:
    assert shard(1, 0xA9F37ED0) == 0xA
    assert shard(2, 0xA9F37ED0) == 0xA9
    assert shard(8, 0xA9F37ED0) == 0xA9F37ED0


def test_shard_level_zero_is_single_shard() -> None:
    assert shard(0, 0xFFFFFFFF) == 0


def test_shard_level_two_matches_phrase_cluster() -> None:
    for tokens in (["foo"], ["foo", "street"], ["chamonix", "mont", "blanc"]):
        phrase_id = phrase(terms(tokens))
        assert shard(2, phrase_id) == SCHEME_V2.cluster_of(phrase_id)


def test_shard_rejects_out_of_range_levels() -> None:
    with pytest.raises(ValueError):
        shard(9, 1)
    with pytest.raises(ValueError):
        shard(-1, 1)
