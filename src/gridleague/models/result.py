"""Race result model and the four per-race awards."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

RESULT_SLOTS = 10


class Award(str, Enum):
    """Per-race awards. Values are the result column names."""

    DRIVER_OF_THE_DAY = "driver_of_the_day"
    FASTEST_LAP = "fastest_lap"
    MOST_OVERTAKES = "most_overtakes"
    CLEANEST_DRIVER = "cleanest_driver"


class RaceResult(BaseModel):
    """Recorded classification for one race.

    ``top_ten`` holds driver ids in finishing order; an empty string is an
    unfilled slot. Award fields hold a driver id or an empty string.
    """

    model_config = ConfigDict(frozen=True)

    race_id: int
    top_ten: tuple[str, ...] = ()
    driver_of_the_day: str = ""
    fastest_lap: str = ""
    most_overtakes: str = ""
    cleanest_driver: str = ""

    @field_validator("top_ten", mode="before")
    @classmethod
    def _blank_missing_slots(cls, value: object) -> object:
        if value is None:
            return ()
        if isinstance(value, (list, tuple)):
            return tuple("" if slot is None else slot for slot in value)
        return value

    @field_validator(
        "driver_of_the_day", "fastest_lap", "most_overtakes", "cleanest_driver",
        mode="before",
    )
    @classmethod
    def _blank_missing_award(cls, value: object) -> object:
        return "" if value is None else value

    @classmethod
    def blank(cls, race_id: int, slots: int = RESULT_SLOTS) -> RaceResult:
        """An empty result: every slot unfilled, no award winners."""
        return cls(race_id=race_id, top_ten=("",) * slots)

    def award_winner(self, award: Award) -> str:
        return getattr(self, award.value)

    def filled_positions(self) -> list[str]:
        return [driver_id for driver_id in self.top_ten if driver_id]

    def has_duplicates(self) -> bool:
        filled = self.filled_positions()
        return len(set(filled)) != len(filled)

    def is_complete(self, slots: int = RESULT_SLOTS) -> bool:
        """True when the first *slots* positions are all filled with distinct drivers."""
        scored = self.top_ten[:slots]
        return (
            len(scored) == slots
            and all(scored)
            and len(set(scored)) == slots
        )
