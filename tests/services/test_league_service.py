"""Tests for LeagueService policies over an in-memory repository."""

from __future__ import annotations

import pytest

from gridleague.data import InMemoryLeagueRepository
from gridleague.models import AuthSession, Award, LeaguePlayer, RaceResult, TeamOverride
from gridleague.reference import DRIVERS, TEAM_COLORS
from gridleague.services import (
    Actor,
    LeagueService,
    LeagueServiceError,
    NotAuthorizedError,
    ResultValidationError,
    RosterError,
    UnknownEntityError,
)

TOP_TEN = [d.id for d in DRIVERS[:10]]
AWARDS = {
    Award.DRIVER_OF_THE_DAY: TOP_TEN[0],
    Award.FASTEST_LAP: TOP_TEN[1],
    Award.MOST_OVERTAKES: TOP_TEN[2],
    Award.CLEANEST_DRIVER: TOP_TEN[3],
}


@pytest.fixture
def repo() -> InMemoryLeagueRepository:
    return InMemoryLeagueRepository()


@pytest.fixture
def admin(repo) -> LeagueService:
    return LeagueService(repo, actor=Actor(user_id="u1", email="admin@example.com", is_admin=True))


@pytest.fixture
def viewer(repo) -> LeagueService:
    return LeagueService(repo)


class TestActor:
    def test_anonymous(self) -> None:
        actor = Actor.anonymous()
        assert actor.user_id is None
        assert not actor.is_admin

    def test_from_session_admin(self, session_payload) -> None:
        session = AuthSession.model_validate(session_payload)
        actor = Actor.from_session(session, [" Admin@Example.com "])
        assert actor.is_admin
        assert actor.user_id == "7f1c"
        assert actor.email == "admin@example.com"

    def test_from_session_not_listed(self, session_payload) -> None:
        session = AuthSession.model_validate(session_payload)
        assert not Actor.from_session(session, ["someone@example.com"]).is_admin

    def test_from_no_session(self) -> None:
        assert Actor.from_session(None, ["admin@example.com"]) == Actor.anonymous()


class TestAdminGate:
    def test_viewer_cannot_save_result(self, viewer, repo) -> None:
        with pytest.raises(NotAuthorizedError, match="Only the league admin"):
            viewer.save_race_result(1, TOP_TEN, AWARDS)
        assert repo.list_results() == []

    @pytest.mark.parametrize(
        "call",
        [
            lambda s: s.reset_race_result(1),
            lambda s: s.delete_race_result(1),
            lambda s: s.set_team_override("SAI", "Ferrari"),
            lambda s: s.clear_team_override("SAI"),
            lambda s: s.add_league_player("Sam", "NOR"),
            lambda s: s.reassign_league_player("1", "NOR"),
            lambda s: s.remove_league_player("1"),
            lambda s: s.reset_league(),
        ],
    )
    def test_viewer_cannot_mutate(self, viewer, call) -> None:
        with pytest.raises(NotAuthorizedError):
            call(viewer)

    def test_viewer_can_read(self, admin, viewer) -> None:
        admin.save_race_result(1, TOP_TEN, AWARDS)
        standings = viewer.driver_standings()
        assert standings[0].driver_id == TOP_TEN[0]
        assert standings[0].points == 25


class TestSaveRaceResult:
    def test_saves_and_scores(self, admin, repo) -> None:
        saved = admin.save_race_result(1, TOP_TEN, AWARDS)
        assert repo.list_results() == [saved]
        assert saved.driver_of_the_day == TOP_TEN[0]
        assert admin.completed_race_ids() == {1}

    def test_replaces_earlier_result(self, admin, repo) -> None:
        admin.save_race_result(1, TOP_TEN, AWARDS)
        admin.save_race_result(1, list(reversed(TOP_TEN)), AWARDS)
        results = repo.list_results()
        assert len(results) == 1
        assert results[0].top_ten[0] == TOP_TEN[-1]

    def test_unknown_race(self, admin) -> None:
        with pytest.raises(UnknownEntityError):
            admin.save_race_result(99, TOP_TEN, AWARDS)

    def test_unfilled_slot(self, admin) -> None:
        top_ten = TOP_TEN[:9] + [""]
        with pytest.raises(ResultValidationError, match="Please fill all top 10 positions."):
            admin.save_race_result(1, top_ten, AWARDS)

    def test_short_classification(self, admin) -> None:
        with pytest.raises(ResultValidationError, match="Please fill all top 10 positions."):
            admin.save_race_result(1, TOP_TEN[:5], AWARDS)

    def test_duplicate_driver(self, admin) -> None:
        top_ten = TOP_TEN[:9] + [TOP_TEN[0]]
        with pytest.raises(ResultValidationError, match="only appear once"):
            admin.save_race_result(1, top_ten, AWARDS)

    def test_unknown_driver(self, admin) -> None:
        top_ten = TOP_TEN[:9] + ["XXX"]
        with pytest.raises(ResultValidationError, match="XXX"):
            admin.save_race_result(1, top_ten, AWARDS)

    def test_missing_award(self, admin, repo) -> None:
        awards = {k: v for k, v in AWARDS.items() if k is not Award.FASTEST_LAP}
        with pytest.raises(ResultValidationError, match="fastest_lap"):
            admin.save_race_result(1, TOP_TEN, awards)
        assert repo.list_results() == []

    def test_unknown_award_winner(self, admin) -> None:
        awards = {**AWARDS, Award.CLEANEST_DRIVER: "XXX"}
        with pytest.raises(ResultValidationError, match="Unknown award winners"):
            admin.save_race_result(1, TOP_TEN, awards)

    def test_award_winner_outside_top_ten(self, admin) -> None:
        awards = {**AWARDS, Award.MOST_OVERTAKES: DRIVERS[-1].id}
        saved = admin.save_race_result(1, TOP_TEN, awards)
        assert saved.most_overtakes == DRIVERS[-1].id


class TestResetAndDelete:
    def test_reset_blanks_result(self, admin, repo) -> None:
        admin.save_race_result(2, TOP_TEN, AWARDS)
        blank = admin.reset_race_result(2)
        assert repo.list_results() == [blank]
        assert blank == RaceResult.blank(2)
        assert admin.completed_race_ids() == set()
        assert all(s.points == 0 for s in admin.driver_standings())

    def test_reset_unknown_race(self, admin) -> None:
        with pytest.raises(UnknownEntityError):
            admin.reset_race_result(99)

    def test_delete(self, admin, repo) -> None:
        admin.save_race_result(2, TOP_TEN, AWARDS)
        admin.delete_race_result(2)
        assert repo.list_results() == []


class TestTeamOverrides:
    def test_known_team_uses_team_color(self, admin, repo) -> None:
        override = admin.set_team_override("SAI", "Ferrari")
        assert override == TeamOverride(
            driver_id="SAI", team="Ferrari", team_color=TEAM_COLORS["Ferrari"],
        )
        assert repo.list_overrides() == [override]

    def test_unknown_team_keeps_driver_color(self, admin) -> None:
        sainz = next(d for d in DRIVERS if d.id == "SAI")
        override = admin.set_team_override("SAI", "  Privateer  ")
        assert override.team == "Privateer"
        assert override.team_color == sainz.team_color

    def test_blank_team_rejected(self, admin) -> None:
        with pytest.raises(LeagueServiceError, match="Team name is required."):
            admin.set_team_override("SAI", "   ")

    def test_unknown_driver(self, admin) -> None:
        with pytest.raises(UnknownEntityError):
            admin.set_team_override("XXX", "Ferrari")

    def test_override_moves_constructor_points(self, admin) -> None:
        admin.save_race_result(1, TOP_TEN, AWARDS)
        winner = DRIVERS[0]
        before = {c.team: c.points for c in admin.constructor_standings()}
        admin.set_team_override(winner.id, "Williams")
        after = {c.team: c.points for c in admin.constructor_standings()}
        assert after["Williams"] == before["Williams"] + 25
        assert after[winner.team] == before[winner.team] - 25

    def test_clear(self, admin, repo) -> None:
        admin.set_team_override("SAI", "Ferrari")
        admin.clear_team_override("SAI")
        assert repo.list_overrides() == []


class TestRoster:
    def test_add_and_attach(self, admin) -> None:
        player_id = admin.add_league_player("  Sam ", "NOR")
        assert player_id
        standing = next(s for s in admin.driver_standings() if s.driver_id == "NOR")
        assert standing.league_player_name == "Sam"

    def test_blank_name(self, admin) -> None:
        with pytest.raises(RosterError, match="Player name is required."):
            admin.add_league_player(" ", "NOR")

    def test_unknown_driver(self, admin) -> None:
        with pytest.raises(UnknownEntityError):
            admin.add_league_player("Sam", "XXX")

    def test_driver_already_claimed(self, admin) -> None:
        admin.add_league_player("Sam", "NOR")
        with pytest.raises(RosterError, match="already assigned"):
            admin.add_league_player("Alex", "NOR")

    def test_roster_cap(self, admin) -> None:
        for i, driver in enumerate(DRIVERS[:5]):
            admin.add_league_player(f"Player {i}", driver.id)
        with pytest.raises(RosterError, match="You can only have 5 league players."):
            admin.add_league_player("Extra", DRIVERS[5].id)

    def test_custom_roster_size(self, repo) -> None:
        service = LeagueService(repo, actor=Actor(is_admin=True), roster_size=1)
        service.add_league_player("Sam", "NOR")
        with pytest.raises(RosterError, match="1 league players"):
            service.add_league_player("Alex", "VER")

    def test_available_drivers(self, admin) -> None:
        admin.add_league_player("Sam", "NOR")
        available = admin.available_drivers()
        assert "NOR" not in {d.id for d in available}
        assert len(available) == len(DRIVERS) - 1
        assert available[0].id == DRIVERS[0].id

    def test_reassign(self, admin, repo) -> None:
        player_id = admin.add_league_player("Sam", "NOR")
        admin.reassign_league_player(player_id, "PIA")
        assert repo.list_players() == [LeaguePlayer(id=player_id, name="Sam", driver_id="PIA")]

    def test_reassign_to_own_driver(self, admin, repo) -> None:
        player_id = admin.add_league_player("Sam", "NOR")
        admin.reassign_league_player(player_id, "NOR")
        assert repo.list_players()[0].driver_id == "NOR"

    def test_reassign_to_claimed_driver(self, admin) -> None:
        admin.add_league_player("Sam", "NOR")
        alex = admin.add_league_player("Alex", "VER")
        with pytest.raises(RosterError):
            admin.reassign_league_player(alex, "NOR")

    def test_reassign_unknown_player(self, admin) -> None:
        with pytest.raises(UnknownEntityError):
            admin.reassign_league_player("nope", "NOR")

    def test_remove(self, admin, repo) -> None:
        player_id = admin.add_league_player("Sam", "NOR")
        admin.remove_league_player(player_id)
        assert repo.list_players() == []


class TestReads:
    def test_snapshot(self, admin) -> None:
        admin.set_team_override("SAI", "Ferrari")
        admin.add_league_player("Sam", "NOR")
        admin.save_race_result(1, TOP_TEN, AWARDS)
        snapshot = admin.load_snapshot()
        assert len(snapshot.overrides) == 1
        assert len(snapshot.results) == 1
        assert len(snapshot.players) == 1
        assert snapshot.override_map["SAI"].team == "Ferrari"

    def test_award_leaders(self, admin) -> None:
        admin.save_race_result(1, TOP_TEN, AWARDS)
        admin.save_race_result(2, TOP_TEN, {**AWARDS, Award.FASTEST_LAP: TOP_TEN[0]})
        leaders = admin.award_leaders()
        assert set(leaders) == set(Award)
        assert leaders[Award.DRIVER_OF_THE_DAY].standing.driver_id == TOP_TEN[0]
        assert leaders[Award.DRIVER_OF_THE_DAY].count == 2
        # TOP_TEN[0] and TOP_TEN[1] have one fastest lap each; the points leader wins
        assert leaders[Award.FASTEST_LAP].standing.driver_id == TOP_TEN[0]
        assert leaders[Award.FASTEST_LAP].count == 1

    def test_award_leaders_empty(self, viewer) -> None:
        assert all(leader is None for leader in viewer.award_leaders().values())

    def test_placements_and_progression(self, admin) -> None:
        admin.save_race_result(1, TOP_TEN, AWARDS)
        snapshot = admin.load_snapshot()
        placements = admin.placement_stats(snapshot)
        assert placements[0].driver_id == TOP_TEN[0]
        assert placements[0].finishes_at(1) == 1
        progression = admin.points_progression(snapshot)
        assert progression[0].driver_id == TOP_TEN[0]
        assert progression[0].cumulative[0] == 25
        assert progression[0].cumulative[-1] == 25
        assert len(progression[0].race_ids) == 24


class TestResetLeague:
    def test_clears_players_and_results_keeps_overrides(self, admin, repo) -> None:
        admin.set_team_override("SAI", "Ferrari")
        admin.add_league_player("Sam", "NOR")
        admin.save_race_result(1, TOP_TEN, AWARDS)
        admin.save_race_result(2, TOP_TEN, AWARDS)

        admin.reset_league()

        assert repo.list_players() == []
        assert repo.list_results() == []
        assert len(repo.list_overrides()) == 1
