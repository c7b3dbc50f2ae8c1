"""Shared test fixtures and sample backend rows."""

from __future__ import annotations

import logging

import pytest

BASE_URL = "https://league.test"
API_KEY = "anon-test-key"


SAMPLE_OVERRIDE_ROW = {
    "driver_id": "SAI",
    "new_team": "Ferrari",
    "new_color": "#E8002D",
}

SAMPLE_RESULT_ROW = {
    "race_id": 1,
    "top_ten": ["NOR", "VER", "PIA", "LEC", "RUS", "HAM", "SAI", "ALO", "GAS", "ALB"],
    "driver_of_the_day": "NOR",
    "fastest_lap": "VER",
    "most_overtakes": "SAI",
    "cleanest_driver": "ALB",
}

SAMPLE_PLAYER_ROW = {
    "id": "1699999999999",
    "name": "Sam",
    "driver_id": "NOR",
}

SAMPLE_SESSION = {
    "access_token": "user-jwt",
    "token_type": "bearer",
    "expires_in": 3600,
    "refresh_token": "refresh-me",
    "user": {"id": "7f1c", "email": "admin@example.com"},
}


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def api_key() -> str:
    return API_KEY


@pytest.fixture
def override_row() -> dict:
    return dict(SAMPLE_OVERRIDE_ROW)


@pytest.fixture
def result_row() -> dict:
    return {**SAMPLE_RESULT_ROW, "top_ten": list(SAMPLE_RESULT_ROW["top_ten"])}


@pytest.fixture
def player_row() -> dict:
    return dict(SAMPLE_PLAYER_ROW)


@pytest.fixture
def session_payload() -> dict:
    return {**SAMPLE_SESSION, "user": dict(SAMPLE_SESSION["user"])}


@pytest.fixture(autouse=True)
def _isolated_call_log(tmp_path):
    """Send the call log to tmp_path and drop any cached handler."""
    import gridleague.api_logging as mod

    old_logger = mod._logger
    old_dir = mod._LOG_DIR
    old_file = mod._LOG_FILE

    named_logger = logging.getLogger("gridleague.api")
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)

    mod._logger = None
    mod._LOG_DIR = str(tmp_path)
    mod._LOG_FILE = str(tmp_path / "league_calls.log")

    yield tmp_path

    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir
    mod._LOG_FILE = old_file
