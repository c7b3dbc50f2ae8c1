"""Fixtures for the standings and league service tests: a four-driver grid."""

from __future__ import annotations

from datetime import date

import pytest

from gridleague.models import Driver, Race, RaceResult

T1_COLOR = "#111111"
T2_COLOR = "#222222"


@pytest.fixture
def grid() -> list[Driver]:
    """A, B drive for T1; C, D drive for T2."""
    return [
        Driver(id="A", name="Driver A", number=1, team="T1", team_color=T1_COLOR, country="X"),
        Driver(id="B", name="Driver B", number=2, team="T1", team_color=T1_COLOR, country="X"),
        Driver(id="C", name="Driver C", number=3, team="T2", team_color=T2_COLOR, country="Y"),
        Driver(id="D", name="Driver D", number=4, team="T2", team_color=T2_COLOR, country="Y"),
    ]


@pytest.fixture
def calendar() -> list[Race]:
    return [
        Race(id=3, name="Race 3", country="Z", circuit="C3", date=date(2025, 3, 30)),
        Race(id=1, name="Race 1", country="Z", circuit="C1", date=date(2025, 3, 16)),
        Race(id=2, name="Race 2", country="Z", circuit="C2", date=date(2025, 3, 23)),
    ]


@pytest.fixture
def make_result():
    """Build a RaceResult from a classification and optional award winners."""

    def _make(race_id: int, *top_ten: str, **awards: str) -> RaceResult:
        return RaceResult(race_id=race_id, top_ten=tuple(top_ten), **awards)

    return _make
