import logging
from dataclasses import dataclass
from datetime import date

from django.db import DatabaseError, transaction

from championship.exceptions import NotFound, PersistenceFailure, PolicyViolation
from championship.models import Race, Result, Season

logger = logging.getLogger(__name__)


@dataclass
class SeasonStatistics:
    year: int
    races: int
    results: int
    drivers: int


def _shift_year(day, years=1):
    if day is None:
        return None
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        # 29 February in a non-leap target year
        return date(day.year + years, 2, 28)


def get_season(year):
    try:
        return Season.objects.get(year=year)
    except Season.DoesNotExist:
        raise NotFound('season', year)


def copy_season_structure(source_year, target_year):
    """
    Copy the race calendar of one season into another.

    Races keep their name, circuit and GP number; dates move forward by the
    difference between the two years. The target season is created when it
    does not exist; a target that already has races raises PolicyViolation.
    Returns the number of races copied.
    """
    logger.info(f"Copying season structure from {source_year} to {target_year}")

    try:
        with transaction.atomic():
            source = get_season(source_year)
            source_races = list(source.races.select_related('circuit').order_by('gp_number'))
            if not source_races:
                logger.warning(f"Season {source_year} has no races to copy")
                return 0

            target, created = Season.objects.get_or_create(year=target_year)
            if target.races.exists():
                raise PolicyViolation(
                    f"Season {target_year} already has races; delete them before copying {source_year} into it"
                )
            if created:
                logger.info(f"Season {target_year} created")

            copied = 0
            for race in source_races:
                Race.objects.create(
                    season=target,
                    circuit=race.circuit,
                    gp_number=race.gp_number,
                    name=race.name,
                    date=_shift_year(race.date, target_year - source_year),
                )
                copied += 1
                logger.debug(f"Race copied: {race.name} (GP #{race.gp_number})")
    except DatabaseError as e:
        logger.error(f"Error copying season {source_year} to {target_year}", exc_info=True)
        raise PersistenceFailure(
            f"Could not copy season {source_year} to {target_year}: {e}", entity=f"season {target_year}"
        ) from e

    logger.info(f"Copied {copied} races from {source_year} to {target_year}")
    return copied


def initialize_season(year):
    """Create ``year`` from the previous season's calendar unless it already has races."""
    if Race.objects.filter(season__year=year).exists():
        logger.warning(f"Season {year} is already initialized")
        return False

    copied = copy_season_structure(year - 1, year)
    logger.info(f"Season {year} initialized with {copied} races")
    return copied > 0


def season_statistics(year):
    results = Result.objects.for_season(year)
    return SeasonStatistics(
        year=year,
        races=Race.objects.filter(season__year=year).count(),
        results=results.count(),
        drivers=results.values('driver').distinct().count(),
    )


def delete_season(year, cascade=False):
    """
    Delete a season. A season that still has races is only removed with
    ``cascade=True``, which also deletes its races and their results.

    Returns the number of races deleted with it.
    """
    try:
        with transaction.atomic():
            season = get_season(year)
            race_count = season.races.count()
            if race_count and not cascade:
                raise PolicyViolation(
                    f"Season {year} has {race_count} races; delete them first or cascade"
                )
            season.delete()
    except DatabaseError as e:
        logger.error(f"Error deleting season {year}", exc_info=True)
        raise PersistenceFailure(f"Could not delete season {year}: {e}", entity=f"season {year}") from e

    logger.info(f"Season {year} deleted together with {race_count} races")
    return race_count
