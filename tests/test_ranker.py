"""Tests for search filtering, sorting and truncation of ranked views."""

import pytest

from app.models import ViewConfig, SortField, SortDirection
from app.ranking import ranked_view, compare_candidates, matches_search


def totals(rows):
    return [row.total for row in rows]


def names(rows):
    return [row.candidate.name for row in rows]


@pytest.fixture
def trio(make_candidate):
    return [
        make_candidate(name="Mid", crisis_management=100, sustainability=90, team_motivation=90),
        make_candidate(name="Low", crisis_management=50, sustainability=50, team_motivation=50),
        make_candidate(name="High", crisis_management=100, sustainability=100, team_motivation=100),
    ]


class TestSorting:

    def test_total_descending(self, trio):
        assert totals(ranked_view(trio, ViewConfig())) == [300, 280, 150]

    def test_total_ascending(self, trio):
        config = ViewConfig(sort_direction=SortDirection.ASC)
        assert totals(ranked_view(trio, config)) == [150, 280, 300]

    def test_name_is_case_insensitive(self, make_candidate):
        candidates = [
            make_candidate(name="charlie"),
            make_candidate(name="Bravo"),
            make_candidate(name="alpha"),
        ]
        config = ViewConfig(sort_field=SortField.NAME, sort_direction=SortDirection.ASC)
        assert names(ranked_view(candidates, config)) == ["alpha", "Bravo", "charlie"]

    @pytest.mark.parametrize("field,attribute", [
        (SortField.EXPERIENCE, "experience_years"),
        (SortField.CRISIS, "crisis_management"),
        (SortField.SUSTAINABILITY, "sustainability"),
        (SortField.MOTIVATION, "team_motivation"),
    ])
    def test_numeric_fields_descending(self, roster, field, attribute):
        rows = ranked_view(roster, ViewConfig(sort_field=field))
        values = [getattr(row.candidate, attribute) for row in rows]
        assert values == sorted(values, reverse=True)
        assert values[0] == max(getattr(c, attribute) for c in roster)

    @pytest.mark.parametrize("direction", [SortDirection.ASC, SortDirection.DESC])
    def test_ties_keep_input_order(self, make_candidate, direction):
        candidates = [make_candidate(name=f"Tied {i}") for i in range(4)]
        rows = ranked_view(candidates, ViewConfig(sort_direction=direction))
        assert names(rows) == ["Tied 0", "Tied 1", "Tied 2", "Tied 3"]

    def test_three_way_comparator(self, trio):
        mid, low, high = trio
        assert compare_candidates(low, high, SortField.TOTAL) < 0
        assert compare_candidates(high, low, SortField.TOTAL) > 0
        assert compare_candidates(mid, mid, SortField.TOTAL) == 0

    def test_ranks_are_one_based(self, trio):
        rows = ranked_view(trio, ViewConfig())
        assert [row.rank for row in rows] == [1, 2, 3]
        assert [row.badge for row in rows] == ["crown", "medal", "award"]


class TestSearch:

    def test_matches_name_case_insensitive(self, make_candidate):
        candidate = make_candidate(name="Grace Donnelly")
        assert matches_search(candidate, "DONN")
        assert not matches_search(candidate, "xyz")

    def test_matches_skill_substring(self, make_candidate):
        candidate = make_candidate(name="Felix Baumann", skills=["Leadership", "Safety", "Recycling"])
        assert matches_search(candidate, "lead")
        assert not matches_search(candidate, "lead", search_skills=False)

    def test_empty_query_keeps_all(self, make_candidate):
        assert matches_search(make_candidate(), "")

    def test_filter_is_subset(self, roster):
        everything = ranked_view(roster, ViewConfig(limit=100))
        for query in ("a", "safety", "Sarah", "zzz", "OPER", " "):
            filtered = ranked_view(roster, ViewConfig(search=query, limit=100))
            assert len(filtered) <= len(everything)
            assert {r.candidate.id for r in filtered} <= {r.candidate.id for r in everything}

    def test_no_match_yields_empty_view(self, roster):
        assert ranked_view(roster, ViewConfig(search="no such candidate")) == []

    def test_skill_search_hits_every_holder(self, roster):
        holders = [c for c in roster if "Safety" in c.skills]
        rows = ranked_view(roster, ViewConfig(search="safety", limit=100))
        assert len(rows) == len(holders)


class TestTruncation:

    def test_never_more_than_ten(self, roster):
        assert len(roster) == 40
        for field in SortField:
            for direction in SortDirection:
                config = ViewConfig(sort_field=field, sort_direction=direction)
                assert len(ranked_view(roster, config)) == 10

    def test_limit_is_configurable(self, roster):
        assert len(ranked_view(roster, ViewConfig(limit=3))) == 3
        assert ranked_view(roster, ViewConfig(limit=0)) == []

    def test_top_of_fixture(self, roster):
        rows = ranked_view(roster, ViewConfig())
        assert rows[0].candidate.name == "Sarah Gutkowski"
        assert rows[0].total == 290


class TestViewProperties:

    def test_idempotent(self, roster):
        config = ViewConfig(sort_field=SortField.NAME, search="e")
        assert ranked_view(roster, config) == ranked_view(roster, config)

    def test_does_not_reorder_input(self, roster):
        before = [c.id for c in roster]
        ranked_view(roster, ViewConfig(sort_direction=SortDirection.ASC))
        assert [c.id for c in roster] == before

    def test_malformed_records_excluded(self, make_candidate):
        good = make_candidate()
        rows = ranked_view([good.to_dict(), {"id": 99, "name": "Broken"}], ViewConfig())
        assert [row.candidate.id for row in rows] == [good.id]


class TestViewConfig:

    def test_defaults(self):
        config = ViewConfig()
        assert config.sort_field is SortField.TOTAL
        assert config.sort_direction is SortDirection.DESC
        assert config.search == ""
        assert config.limit == 10

    def test_from_params(self):
        config = ViewConfig.from_params(sort="Crisis", direction="ASC", search="ops")
        assert config.sort_field is SortField.CRISIS
        assert config.sort_direction is SortDirection.ASC
        assert config.search == "ops"

    def test_from_params_rejects_unknown_field(self):
        with pytest.raises(ValueError):
            ViewConfig.from_params(sort="salary")

    def test_toggle_same_field_flips_direction(self):
        config = ViewConfig().toggle_sort(SortField.TOTAL)
        assert config.sort_direction is SortDirection.ASC
        assert config.toggle_sort(SortField.TOTAL).sort_direction is SortDirection.DESC

    def test_toggle_new_field_starts_descending(self):
        config = ViewConfig(sort_direction=SortDirection.ASC).toggle_sort(SortField.NAME)
        assert config.sort_field is SortField.NAME
        assert config.sort_direction is SortDirection.DESC
