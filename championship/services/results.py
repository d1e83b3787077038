"""
Entry and removal of race results.

A race's result set is always written as a whole: entering results replaces
whatever the race had before, inside a single transaction.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from django.conf import settings
from django.db import DatabaseError, transaction

from championship import editability
from championship.exceptions import (
    NoResultsToDelete,
    PersistenceFailure,
    PolicyViolation,
    ValidationError,
)
from championship.models import Driver, Race, Result, SprintResult
from championship.points import ZERO, calculate_points, sprint_points
from championship.services.catalog import get_race, season_calendar

logger = logging.getLogger(__name__)

TRUE_VALUES = ('1', 'true', 'yes', 'y', 'x')


def _as_bool(value):
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUE_VALUES


def _as_int(value):
    # int() would turn True into 1 and truncate 2.9 to 2
    if isinstance(value, bool):
        raise ValueError(f"{value!r} is not an integer")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{value!r} is not an integer")
    return int(value)


def _as_optional_int(value):
    if value is None or value == '':
        return None
    return _as_int(value)


def _as_optional_str(value):
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass
class ResultEntry:
    driver_id: int
    position: int
    laps: Optional[int] = None
    time: Optional[str] = None
    withdrawn: bool = False
    withdrawal_reason: Optional[str] = None
    has_fastest_lap: bool = False

    @classmethod
    def from_dict(cls, row):
        """Build an entry from a parsed JSON object or CSV row."""
        try:
            driver_id = _as_int(row['driver_id'])
            position = _as_int(row['position'])
            laps = _as_optional_int(row.get('laps'))
        except KeyError as e:
            raise ValidationError(f"Result entry is missing {e.args[0]!r}: {row!r}") from e
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Result entry has an invalid number: {row!r}") from e

        return cls(
            driver_id=driver_id,
            position=position,
            laps=laps,
            time=_as_optional_str(row.get('time')),
            withdrawn=_as_bool(row.get('withdrawn')),
            withdrawal_reason=_as_optional_str(row.get('withdrawal_reason')),
            has_fastest_lap=_as_bool(row.get('has_fastest_lap')),
        )

    def awarded_points(self, sprint=False):
        # Withdrawn drivers never score, fastest lap included
        if self.withdrawn:
            return ZERO
        if sprint:
            return sprint_points(self.position)
        return calculate_points(self.position, self.has_fastest_lap)


def _result_model(sprint):
    return SprintResult if sprint else Result


def _label(sprint):
    return 'sprint results' if sprint else 'results'


def check_editable(race):
    if not editability.allows_manual_entry(race.date):
        raise PolicyViolation(
            f"{race.name} ({race.date}) is before the freeze date "
            f"{editability.get_freeze_date()}; its results cannot be changed manually"
        )


def validate_entries(entries: List[ResultEntry]):
    """Reject positions outside the grid and drivers listed more than once."""
    grid_size = settings.F1_SEASON_CONFIG['grid_size']
    seen_drivers = set()

    for entry in entries:
        position = entry.position
        if isinstance(position, bool) or not isinstance(position, int) or not 1 <= position <= grid_size:
            raise ValidationError(
                f"Invalid position {position!r} for driver {entry.driver_id}: "
                f"must be between 1 and {grid_size}"
            )
        if entry.driver_id in seen_drivers:
            raise ValidationError(f"Driver {entry.driver_id} appears more than once")
        seen_drivers.add(entry.driver_id)


def ingest_race_results(race_id, entries: Iterable[ResultEntry], sprint=False) -> int:
    """
    Replace the full result set of a race and compute each driver's points.

    Entries pointing at unknown drivers are logged and skipped. Any other
    failure rolls the whole operation back, leaving previous results intact.

    Returns the number of results written.
    """
    entries = list(entries)
    model = _result_model(sprint)
    label = _label(sprint)
    logger.info(f"Entering {len(entries)} {label} for race {race_id}")

    try:
        with transaction.atomic():
            race = get_race(race_id)
            check_editable(race)
            validate_entries(entries)

            existing = model.objects.filter(race=race)
            existing_count = existing.count()
            if existing_count:
                logger.warning(
                    f"Race {race_id} already has {existing_count} {label}; they will be replaced"
                )
                existing.delete()

            written = 0
            for entry in entries:
                driver = Driver.objects.filter(pk=entry.driver_id).first()
                if driver is None:
                    logger.warning(f"Driver {entry.driver_id} does not exist, entry skipped")
                    continue

                awarded = entry.awarded_points(sprint=sprint)
                model.objects.create(
                    race=race,
                    driver=driver,
                    position=entry.position,
                    points=awarded,
                    laps=entry.laps,
                    time=entry.time,
                    withdrawn=entry.withdrawn,
                    withdrawal_reason=entry.withdrawal_reason if entry.withdrawn else None,
                )
                written += 1
                logger.debug(f"{driver.name} - P{entry.position} - {awarded} points")
    except DatabaseError as e:
        logger.error(f"Error entering {label} for race {race_id}", exc_info=True)
        raise PersistenceFailure(
            f"Could not store {label} for race {race_id}: {e}", entity=f"race {race_id}"
        ) from e

    logger.info(f"Stored {written} {label} for {race.name}")
    return written


def delete_race_results(race_id, sprint=False) -> int:
    """Delete every result of an editable race. Returns the number deleted."""
    model = _result_model(sprint)
    label = _label(sprint)
    logger.info(f"Deleting {label} of race {race_id}")

    try:
        with transaction.atomic():
            race = get_race(race_id)
            check_editable(race)
            deleted, _ = model.objects.filter(race=race).delete()
            if not deleted:
                raise NoResultsToDelete(race_id)
    except DatabaseError as e:
        logger.error(f"Error deleting {label} for race {race_id}", exc_info=True)
        raise PersistenceFailure(
            f"Could not delete {label} for race {race_id}: {e}", entity=f"race {race_id}"
        ) from e

    logger.info(f"Deleted {deleted} {label} from {race.name}")
    return deleted


def race_allows_manual_entry(race_id) -> bool:
    try:
        race = Race.objects.only('date').get(pk=race_id)
    except Race.DoesNotExist:
        return False
    return editability.allows_manual_entry(race.date)


def editable_races(year) -> List[Race]:
    races = list(season_calendar(year))
    editable = [race for race in races if editability.allows_manual_entry(race.date)]
    logger.info(f"Editable races in {year}: {len(editable)} of {len(races)}")
    return editable


def race_results(race_id, sprint=False):
    return _result_model(sprint).objects.for_race(race_id)
