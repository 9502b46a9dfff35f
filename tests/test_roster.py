"""Tests for loading the candidate fixture and roster statistics."""

import json

import pytest

from app.models import Roster
from app.models.roster import round_half_up


class TestLoad:

    def test_loads_fixture(self, roster):
        assert len(roster) == 40
        assert roster.get(1).name == "Sarah Gutkowski"
        assert roster.get(999) is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Roster.load(tmp_path / "missing.json")

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "candidates.json"
        path.write_text(json.dumps({"id": 1}), encoding="utf-8")
        with pytest.raises(ValueError):
            Roster.load(path)

    def test_malformed_records_excluded(self, fixture_records):
        records = fixture_records[:3] + [{"id": 50, "name": "No Scores"}, "garbage"]
        roster = Roster.from_records(records)
        assert len(roster) == 3
        assert [r["index"] for r in roster.rejected] == [3, 4]

    def test_duplicate_ids_excluded(self, fixture_records):
        roster = Roster.from_records([fixture_records[0], dict(fixture_records[1], id=fixture_records[0]["id"])])
        assert len(roster) == 1
        assert "duplicate" in roster.rejected[0]["reason"]


class TestStats:

    def test_fixture_stats(self, roster):
        stats = roster.stats()
        experience = [c.experience_years for c in roster]
        totals = [c.total_score for c in roster]

        assert stats["total_candidates"] == 40
        assert stats["average_experience"] == round_half_up(sum(experience) / 40, 1)
        assert stats["average_score"] == round_half_up(sum(totals) / 40 / 3)
        assert stats["top_performer"] == "Sarah Gutkowski"

    def test_empty_roster_has_no_averages(self):
        stats = Roster([]).stats()
        assert stats == {
            "total_candidates": 0,
            "average_experience": None,
            "average_score": None,
            "top_performer": None,
        }

    def test_top_candidate_first_wins_ties(self, make_candidate):
        first = make_candidate(name="First")
        second = make_candidate(name="Second")
        assert Roster([first, second]).top_candidate() is first

    def test_stats_round_halves_up(self, make_candidate):
        candidates = [
            make_candidate(experience_years=1, crisis_management=70, sustainability=70, team_motivation=70),
            make_candidate(experience_years=1, crisis_management=71, sustainability=71, team_motivation=71),
            make_candidate(experience_years=1, crisis_management=70, sustainability=70, team_motivation=70),
            make_candidate(experience_years=2, crisis_management=71, sustainability=71, team_motivation=71),
        ]
        stats = Roster(candidates).stats()
        assert stats["average_experience"] == 1.3
        assert stats["average_score"] == 71


class TestRoundHalfUp:

    @pytest.mark.parametrize("value,digits,expected", [
        (71.25, 1, 71.3),
        (71.75, 1, 71.8),
        (2.5, 0, 3),
        (0.5, 0, 1),
        (70.5, 0, 71),
        (1.005, 2, 1.0),
    ])
    def test_rounding(self, value, digits, expected):
        assert round_half_up(value, digits) == expected

    def test_integer_result_without_digits(self):
        assert isinstance(round_half_up(70.5), int)
        assert isinstance(round_half_up(70.25, 1), float)


class TestSkillCount:

    def test_wrong_skill_counts_excluded(self, fixture_records):
        records = [
            fixture_records[0],
            dict(fixture_records[1], skills=["Safety"]),
            dict(fixture_records[2], skills=["Recycling", "Operations", "Sustainability", "Leadership", "Safety"]),
        ]
        roster = Roster.from_records(records)
        assert [c.id for c in roster] == [fixture_records[0]["id"]]
        assert [r["index"] for r in roster.rejected] == [1, 2]
