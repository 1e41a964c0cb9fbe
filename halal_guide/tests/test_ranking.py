from __future__ import annotations

import pytest

from halal_guide.catalog.models import Candidate, Place
from halal_guide.geo.distance import UNKNOWN_DISTANCE_KM, Coordinate
from halal_guide.ranking.config import RankingConfig
from halal_guide.ranking.engine import rank, tokenize
from halal_guide.ranking.scorer import build_content_blob, proximity_bonus, score

EID = Place(name="Eid", category="Halal", lat=37.5, lon=127.0)
USER_AT_EID = Coordinate(latitude=37.5, longitude=127.0)


def _place_at_km(name: str, km_north: float, **kwargs) -> Place:
    # One degree of latitude is ~111.19 km on a 6371 km sphere
    return Place(name=name, lat=37.5 + km_north / 111.19, lon=127.0, **kwargs)


# ── Tokenizer ────────────────────────────────────────────────────────────


class TestTokenize:
    def test_lowercases_and_splits(self):
        assert tokenize("Halal  CHICKEN\tSeoul") == ["halal", "chicken", "seoul"]

    def test_keeps_duplicates(self):
        assert tokenize("kebab kebab") == ["kebab", "kebab"]

    def test_empty(self):
        assert tokenize("") == []
        assert tokenize(None) == []
        assert tokenize("   ") == []


# ── Scorer ───────────────────────────────────────────────────────────────


class TestScorer:
    def test_content_blob_includes_region_and_skips_missing_fields(self):
        blob = build_content_blob(Candidate(place=Place(name="Eid", address="Itaewon"), origin_region="Korea"))
        assert "eid" in blob
        assert "itaewon" in blob
        assert "korea" in blob
        assert "none" not in blob

    @pytest.mark.parametrize(
        "km, expected",
        [(0.0, 20), (4.99, 20), (5.0, 10), (19.9, 10), (20.0, 5), (99.9, 5), (100.0, 0), (UNKNOWN_DISTANCE_KM, 0)],
    )
    def test_proximity_tiers_do_not_stack(self, km, expected):
        assert proximity_bonus(km) == expected

    def test_each_keyword_adds_weight(self):
        candidate = Candidate(place=Place(name="Eid", category="Halal"), origin_region="Korea")
        result = score(candidate, ["eid", "halal", "pizza"])
        assert result.score == 20
        assert result.matched

    def test_region_name_matches(self):
        candidate = Candidate(place=Place(name="Eid"), origin_region="Korea")
        assert score(candidate, ["korea"]).score == 10

    def test_no_position_means_sentinel_and_no_bonus(self):
        candidate = Candidate(place=EID, origin_region="Korea")
        result = score(candidate, ["zzz"])
        assert result.score == 0
        assert result.candidate.distance_km == UNKNOWN_DISTANCE_KM

    def test_missing_place_coordinate_gets_no_bonus(self):
        candidate = Candidate(place=Place(name="Eid"), origin_region="Korea")
        result = score(candidate, ["zzz"], USER_AT_EID)
        assert result.score == 0
        assert result.candidate.distance_km == UNKNOWN_DISTANCE_KM

    def test_proximity_only(self):
        candidate = Candidate(place=EID, origin_region="Korea")
        result = score(candidate, ["chicken"], USER_AT_EID)
        assert result.score == 20
        assert not result.matched
        assert result.candidate.distance_km == pytest.approx(0.0, abs=1e-6)

    def test_custom_weights(self):
        config = RankingConfig(keyword_weight=3, proximity_tiers=((1.0, 7),))
        candidate = Candidate(place=EID, origin_region="Korea")
        assert score(candidate, ["eid"], USER_AT_EID, config).score == 10


# ── Engine scenarios ─────────────────────────────────────────────────────


class TestRankScenarios:
    def test_keyword_match_without_position(self):
        results = rank("eid", {"KR": [EID]})
        assert [r.candidate.place.name for r in results] == ["Eid"]
        assert results[0].score >= 10
        assert results[0].candidate.origin_region == "KR"
        assert results[0].distance_info == ""

    def test_proximity_alone_includes_nearby_place(self):
        results = rank("chicken", {"KR": [EID]}, USER_AT_EID)
        assert len(results) == 1
        assert results[0].score == 20
        assert not results[0].matched
        assert results[0].distance_info == "(0.0km away)"

    def test_empty_query_returns_nothing(self):
        assert rank("", {"KR": [EID]}, USER_AT_EID) == []
        assert rank(None, {"KR": [EID]}, USER_AT_EID) == []
        assert rank("   ", {"KR": [EID]}, USER_AT_EID) == []

    def test_closer_match_ranks_first(self):
        near = _place_at_km("Kebab X", 2, category="kebab")
        far = _place_at_km("Kebab Y", 50, category="kebab")
        results = rank("kebab", {"KR": [far, near]}, USER_AT_EID)

        assert [r.candidate.place.name for r in results] == ["Kebab X", "Kebab Y"]

    def test_tie_on_score_sorted_by_distance(self):
        a = _place_at_km("A kebab", 30)
        b = _place_at_km("B kebab", 60)
        results = rank("kebab", {"KR": [b, a]}, USER_AT_EID)

        assert [r.score for r in results] == [15, 15]
        assert [r.candidate.place.name for r in results] == ["A kebab", "B kebab"]

    def test_address_only_match(self):
        place = Place(name="Shop", address="Itaewon-ro 1")
        results = rank("itaewon", {"KR": [place]})
        assert len(results) == 1
        assert results[0].score == 10

    def test_no_match_returns_empty_without_backfill(self):
        catalog = {"KR": [EID], "JP": [Place(name="Naritaya", category="Ramen")]}
        assert rank("pizza", catalog) == []

    def test_empty_catalog(self):
        assert rank("eid", {}) == []
        assert rank("eid", {"KR": []}) == []

    def test_keyword_across_world_beats_unrelated_nearby(self):
        nearby_unrelated = _place_at_km("Cafe", 50)
        far_match = Place(name="Naritaya Ramen", lat=35.7, lon=139.8)
        results = rank("ramen", {"KR": [nearby_unrelated], "JP": [far_match]}, USER_AT_EID)

        assert [r.candidate.place.name for r in results] == ["Naritaya Ramen", "Cafe"]

    def test_unlocatable_place_sorts_last_within_tie(self):
        located = _place_at_km("Halal A", 500)
        unlocated = Place(name="Halal B")
        results = rank("halal", {"KR": [unlocated, located]}, USER_AT_EID)

        assert [r.candidate.place.name for r in results] == ["Halal A", "Halal B"]
        assert results[1].distance_info == ""


# ── Engine properties ────────────────────────────────────────────────────


def _big_catalog() -> dict[str, list[Place]]:
    catalog: dict[str, list[Place]] = {}
    for region in ["Korea", "Japan", "Malaysia"]:
        places = []
        for i in range(15):
            extra = {"lat": 37.5 + i * 0.05, "lon": 127.0} if i % 3 else {}
            places.append(Place(
                name=f"{region} place {i}",
                category="Halal" if i % 2 else "Cafe",
                desc_en="grilled chicken" if i % 4 == 0 else None,
                **extra,
            ))
        catalog[region] = places
    return catalog


@pytest.mark.parametrize("query", ["halal", "chicken halal", "place", "korea cafe", "nothing-here"])
@pytest.mark.parametrize("position", [None, USER_AT_EID])
def test_rank_invariants(query, position):
    results = rank(query, _big_catalog(), position)

    assert len(results) <= 10
    assert all(r.score > 0 for r in results)
    keys = [(-r.score, r.candidate.distance_km) for r in results]
    assert keys == sorted(keys)
    for r in results:
        if r.candidate.place.coordinate is None:
            assert r.candidate.distance_km == UNKNOWN_DISTANCE_KM
            assert r.score % 10 == 0  # keyword points only


def test_rank_respects_config_cap():
    results = rank("place", _big_catalog(), config=RankingConfig(max_results=3))
    assert len(results) == 3
