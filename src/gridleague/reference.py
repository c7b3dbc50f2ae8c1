"""Fixed 2025 grid and race calendar."""

from __future__ import annotations

from datetime import date

from gridleague.models.reference import Driver, Race

TEAM_COLORS: dict[str, str] = {
    "Red Bull Racing": "#3671C6",
    "Ferrari": "#E8002D",
    "Mercedes": "#27F4D2",
    "McLaren": "#FF8000",
    "Aston Martin": "#229971",
    "Williams": "#64C4FF",
    "Racing Bulls": "#6692FF",
    "Haas F1 Team": "#B6BABD",
    "Kick Sauber": "#52A228",
    "Alpine": "#FF87BC",
}

TEAMS: list[str] = list(TEAM_COLORS)


def _driver(id: str, name: str, number: int, team: str, country: str) -> Driver:
    return Driver(
        id=id, name=name, number=number, team=team,
        team_color=TEAM_COLORS[team], country=country,
    )


DRIVERS: tuple[Driver, ...] = (
    _driver("VER", "Max Verstappen", 1, "Red Bull Racing", "Netherlands"),
    _driver("TSU", "Yuki Tsunoda", 22, "Red Bull Racing", "Japan"),
    _driver("LEC", "Charles Leclerc", 16, "Ferrari", "Monaco"),
    _driver("HAM", "Lewis Hamilton", 44, "Ferrari", "Great Britain"),
    _driver("RUS", "George Russell", 63, "Mercedes", "Great Britain"),
    _driver("ANT", "Kimi Antonelli", 12, "Mercedes", "Italy"),
    _driver("NOR", "Lando Norris", 4, "McLaren", "Great Britain"),
    _driver("PIA", "Oscar Piastri", 81, "McLaren", "Australia"),
    _driver("STR", "Lance Stroll", 18, "Aston Martin", "Canada"),
    _driver("ALO", "Fernando Alonso", 14, "Aston Martin", "Spain"),
    _driver("ALB", "Alexander Albon", 23, "Williams", "Thailand"),
    _driver("SAI", "Carlos Sainz", 55, "Williams", "Spain"),
    _driver("LAW", "Liam Lawson", 30, "Racing Bulls", "New Zealand"),
    _driver("HAD", "Isack Hadjar", 6, "Racing Bulls", "France"),
    _driver("OCO", "Esteban Ocon", 31, "Haas F1 Team", "France"),
    _driver("BEA", "Oliver Bearman", 87, "Haas F1 Team", "Great Britain"),
    _driver("HUL", "Nico Hulkenberg", 27, "Kick Sauber", "Germany"),
    _driver("BOR", "Gabriel Bortoleto", 5, "Kick Sauber", "Brazil"),
    _driver("GAS", "Pierre Gasly", 10, "Alpine", "France"),
    _driver("COL", "Franco Colapinto", 43, "Alpine", "Argentina"),
)

RACES: tuple[Race, ...] = (
    Race(id=1, name="Bahrain Grand Prix", country="Bahrain", circuit="Bahrain International Circuit", date=date(2025, 3, 2)),
    Race(id=2, name="Saudi Arabian Grand Prix", country="Saudi Arabia", circuit="Jeddah Corniche Circuit", date=date(2025, 3, 9)),
    Race(id=3, name="Australian Grand Prix", country="Australia", circuit="Albert Park Circuit", date=date(2025, 3, 23)),
    Race(id=4, name="Japanese Grand Prix", country="Japan", circuit="Suzuka Circuit", date=date(2025, 4, 6)),
    Race(id=5, name="Chinese Grand Prix", country="China", circuit="Shanghai International Circuit", date=date(2025, 4, 20)),
    Race(id=6, name="Miami Grand Prix", country="USA", circuit="Miami International Autodrome", date=date(2025, 5, 4)),
    Race(id=7, name="Emilia Romagna Grand Prix", country="Italy", circuit="Autodromo Enzo e Dino Ferrari", date=date(2025, 5, 18)),
    Race(id=8, name="Monaco Grand Prix", country="Monaco", circuit="Circuit de Monaco", date=date(2025, 5, 25)),
    Race(id=9, name="Spanish Grand Prix", country="Spain", circuit="Circuit de Barcelona-Catalunya", date=date(2025, 6, 1)),
    Race(id=10, name="Canadian Grand Prix", country="Canada", circuit="Circuit Gilles Villeneuve", date=date(2025, 6, 15)),
    Race(id=11, name="Austrian Grand Prix", country="Austria", circuit="Red Bull Ring", date=date(2025, 6, 29)),
    Race(id=12, name="British Grand Prix", country="Great Britain", circuit="Silverstone Circuit", date=date(2025, 7, 6)),
    Race(id=13, name="Hungarian Grand Prix", country="Hungary", circuit="Hungaroring", date=date(2025, 7, 20)),
    Race(id=14, name="Belgian Grand Prix", country="Belgium", circuit="Circuit de Spa-Francorchamps", date=date(2025, 7, 27)),
    Race(id=15, name="Dutch Grand Prix", country="Netherlands", circuit="Circuit Zandvoort", date=date(2025, 8, 31)),
    Race(id=16, name="Italian Grand Prix", country="Italy", circuit="Autodromo Nazionale di Monza", date=date(2025, 9, 7)),
    Race(id=17, name="Azerbaijan Grand Prix", country="Azerbaijan", circuit="Baku City Circuit", date=date(2025, 9, 21)),
    Race(id=18, name="Singapore Grand Prix", country="Singapore", circuit="Marina Bay Street Circuit", date=date(2025, 10, 5)),
    Race(id=19, name="United States Grand Prix", country="USA", circuit="Circuit of the Americas", date=date(2025, 10, 19)),
    Race(id=20, name="Mexico City Grand Prix", country="Mexico", circuit="Autódromo Hermanos Rodríguez", date=date(2025, 10, 26)),
    Race(id=21, name="São Paulo Grand Prix", country="Brazil", circuit="Autódromo José Carlos Pace", date=date(2025, 11, 9)),
    Race(id=22, name="Las Vegas Grand Prix", country="USA", circuit="Las Vegas Street Circuit", date=date(2025, 11, 22)),
    Race(id=23, name="Qatar Grand Prix", country="Qatar", circuit="Losail International Circuit", date=date(2025, 11, 30)),
    Race(id=24, name="Abu Dhabi Grand Prix", country="UAE", circuit="Yas Marina Circuit", date=date(2025, 12, 7)),
)

_DRIVERS_BY_ID = {d.id: d for d in DRIVERS}
_RACES_BY_ID = {r.id: r for r in RACES}


def driver_by_id(driver_id: str) -> Driver | None:
    return _DRIVERS_BY_ID.get(driver_id)


def race_by_id(race_id: int) -> Race | None:
    return _RACES_BY_ID.get(race_id)
