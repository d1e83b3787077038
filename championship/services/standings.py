"""
Championship tables for drivers and constructors.

Grand prix results give points, wins and podiums. Sprint results only add
points. Participants who never scored are left out of the table.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional

from django.db.models import Count, Q, Sum

from championship.models import Result, SprintResult

logger = logging.getLogger(__name__)

DRIVER_FIELDS = ('driver__name', 'driver__number', 'driver__nationality', 'driver__constructor__name')
CONSTRUCTOR_FIELDS = ('driver__constructor__name', 'driver__constructor__nationality')


@dataclass
class DriverStanding:
    position: int
    driver_id: int
    name: str
    number: str
    nationality: str
    constructor_name: Optional[str]
    total_points: Decimal
    wins: int
    podiums: int


@dataclass
class ConstructorStanding:
    position: int
    constructor_id: int
    name: str
    nationality: str
    total_points: Decimal
    wins: int
    podiums: int


def _season_totals(year, key, fields, include_sprints):
    """
    Aggregate a season's results into one row per ``key`` (a driver or a
    constructor), keeping only rows with a positive points total.
    """
    rows: Dict[int, dict] = {}

    grand_prix = (
        Result.objects.for_season(year)
        .filter(**{f'{key}__isnull': False})
        .values(key, *fields)
        .annotate(
            total_points=Sum('points'),
            wins=Count('id', filter=Q(position=1)),
            podiums=Count('id', filter=Q(position__lte=3)),
        )
        .order_by()
    )
    for row in grand_prix:
        row['total_points'] = row['total_points'] or Decimal('0')
        rows[row[key]] = row

    if include_sprints:
        sprints = (
            SprintResult.objects.for_season(year)
            .filter(**{f'{key}__isnull': False})
            .values(key, *fields)
            .annotate(total_points=Sum('points'))
            .order_by()
        )
        for sprint in sprints:
            row = rows.setdefault(sprint[key], dict(sprint, total_points=Decimal('0'), wins=0, podiums=0))
            row['total_points'] += sprint['total_points'] or Decimal('0')

    return [row for row in rows.values() if row['total_points'] > 0]


def _ranked(rows, key, name_field):
    # Name and id only break ties the championship rules leave open
    rows.sort(key=lambda r: (-r['total_points'], -r['wins'], -r['podiums'], r[name_field] or '', r[key]))
    return enumerate(rows, 1)


def driver_standings(year, include_sprints=True) -> List[DriverStanding]:
    rows = _season_totals(year, 'driver', DRIVER_FIELDS, include_sprints)
    standings = [
        DriverStanding(
            position=position,
            driver_id=row['driver'],
            name=row['driver__name'],
            number=row['driver__number'],
            nationality=row['driver__nationality'],
            constructor_name=row['driver__constructor__name'],
            total_points=row['total_points'],
            wins=row['wins'],
            podiums=row['podiums'],
        )
        for position, row in _ranked(rows, 'driver', 'driver__name')
    ]
    logger.info(f"Driver standings for {year}: {len(standings)} drivers")
    return standings


def constructor_standings(year, include_sprints=True) -> List[ConstructorStanding]:
    """Constructor table; each driver's results count for their current constructor."""
    rows = _season_totals(year, 'driver__constructor', CONSTRUCTOR_FIELDS, include_sprints)
    standings = [
        ConstructorStanding(
            position=position,
            constructor_id=row['driver__constructor'],
            name=row['driver__constructor__name'],
            nationality=row['driver__constructor__nationality'],
            total_points=row['total_points'],
            wins=row['wins'],
            podiums=row['podiums'],
        )
        for position, row in _ranked(rows, 'driver__constructor', 'driver__constructor__name')
    ]
    logger.info(f"Constructor standings for {year}: {len(standings)} constructors")
    return standings
