"""Print standings, award leaders and placement stats for a small season."""

from gridleague.data import InMemoryLeagueRepository
from gridleague.models import Award
from gridleague.reference import race_by_id
from gridleague.services import Actor, LeagueService


def main() -> None:
    league = LeagueService(InMemoryLeagueRepository(), actor=Actor(email="admin@example.com", is_admin=True))

    # Roster and a customised grid
    league.add_league_player("Sam", "NOR")
    league.add_league_player("Alex", "VER")
    league.set_team_override("SAI", "Ferrari")

    league.save_race_result(
        1,
        ["NOR", "VER", "PIA", "LEC", "RUS", "HAM", "SAI", "ALO", "GAS", "ALB"],
        {
            Award.DRIVER_OF_THE_DAY: "NOR",
            Award.FASTEST_LAP: "VER",
            Award.MOST_OVERTAKES: "SAI",
            Award.CLEANEST_DRIVER: "ALB",
        },
    )
    league.save_race_result(
        2,
        ["VER", "NOR", "LEC", "PIA", "SAI", "RUS", "HAM", "TSU", "ALO", "HUL"],
        {
            Award.DRIVER_OF_THE_DAY: "VER",
            Award.FASTEST_LAP: "VER",
            Award.MOST_OVERTAKES: "HUL",
            Award.CLEANEST_DRIVER: "NOR",
        },
    )

    snapshot = league.load_snapshot()

    print("=== Drivers' Championship ===")
    for pos, s in enumerate(league.driver_standings(snapshot)[:10], start=1):
        label = f"{s.league_player_name} ({s.driver_name})" if s.league_player_name else s.driver_name
        print(f"  {pos:>2}. {label:<28} {s.team:<18} {s.points:>4}")

    print("\n=== Constructors' Championship ===")
    for pos, c in enumerate(league.constructor_standings(snapshot), start=1):
        print(f"  {pos:>2}. {c.team:<18} {c.points:>4}")

    print("\n=== Award leaders ===")
    for award, leader in league.award_leaders(snapshot).items():
        holder = f"{leader.standing.driver_name} x{leader.count}" if leader else "-"
        print(f"  {award.value:<18} {holder}")

    print("\n=== Placements (top 5) ===")
    for stats in league.placement_stats(snapshot)[:5]:
        avg = f"{stats.average_position:.2f}" if stats.average_position is not None else "N/A"
        print(f"  {stats.driver_name:<20} wins={stats.finishes_at(1)} top10={stats.top_ten_finishes} avg={avg}")

    print("\n=== Completed races ===")
    for race_id in sorted(league.completed_race_ids(snapshot)):
        race = race_by_id(race_id)
        print(f"  R{race_id:<3} {race.name if race else '?'}")


if __name__ == "__main__":
    main()
