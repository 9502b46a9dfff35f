"""Shared fixtures for the HR dashboard tests."""

import json
import random
import shutil
from pathlib import Path

import pytest
import yaml

from app.models import Candidate, Roster


REPO_ROOT = Path(__file__).resolve().parent.parent
FIXTURE_FILE = REPO_ROOT / "data" / "candidates.json"


class FixedRandom(random.Random):
    """Random source whose random() always returns the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def make_candidate():
    """Factory for valid candidates with overridable fields."""
    counter = {"next_id": 1000}

    def _make(**overrides):
        counter["next_id"] += 1
        data = {
            "id": counter["next_id"],
            "name": f"Candidate {counter['next_id']}",
            "experience_years": 5,
            "skills": ["Recycling", "Operations", "Safety"],
            "crisis_management": 70,
            "sustainability": 70,
            "team_motivation": 70,
        }
        data.update(overrides)
        return Candidate.from_dict(data)

    return _make


@pytest.fixture(scope="session")
def fixture_records():
    with open(FIXTURE_FILE, 'r', encoding='utf-8') as f:
        return json.load(f)


@pytest.fixture
def roster():
    return Roster.load(FIXTURE_FILE)


@pytest.fixture
def app_base(tmp_path):
    """A throwaway base path with config/default.yaml and the candidate fixture."""
    (tmp_path / "config").mkdir()
    (tmp_path / "data").mkdir()
    shutil.copy(FIXTURE_FILE, tmp_path / "data" / "candidates.json")

    config = {
        "job_role": "Recycling Production Line Manager",
        "roster": {"data_file": "data/candidates.json"},
        "ranking": {"view_limit": 10},
        "evaluation": {"delay_min_ms": 0, "delay_max_ms": 0, "seed": 42},
        "sharing": {"default_email": "hr-team@company.com", "persist": False},
        "server": {"host": "127.0.0.1", "port": 5000, "debug": False},
    }
    with open(tmp_path / "config" / "default.yaml", 'w', encoding='utf-8') as f:
        yaml.safe_dump(config, f)

    return tmp_path


@pytest.fixture
def app(app_base, monkeypatch):
    for name in ("DATA_FILE", "EVAL_DELAY", "SEED", "HOST", "PORT", "DEBUG"):
        monkeypatch.delenv(f"HR_DASHBOARD_{name}", raising=False)

    from app.main import create_app
    flask_app = create_app(str(app_base))
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
