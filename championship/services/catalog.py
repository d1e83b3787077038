"""Read-only lookups used by the console commands."""

from championship.exceptions import NotFound
from championship.models import Circuit, Constructor, Driver, Race


def season_calendar(year):
    return (
        Race.objects.filter(season__year=year)
        .select_related('season', 'circuit')
        .order_by('gp_number')
    )


def season_circuits(year):
    return Circuit.objects.filter(races__season__year=year).distinct().order_by('name')


def all_drivers():
    return Driver.objects.select_related('constructor').order_by('name')


def all_constructors():
    return Constructor.objects.prefetch_related('drivers').order_by('name')


def get_race(race_id):
    try:
        return Race.objects.select_related('season', 'circuit').get(pk=race_id)
    except Race.DoesNotExist:
        raise NotFound('race', race_id)
