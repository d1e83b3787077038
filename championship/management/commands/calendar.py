from django.conf import settings
from django.core.management.base import BaseCommand

from championship.editability import allows_manual_entry
from championship.services.catalog import season_calendar


class Command(BaseCommand):
    help = 'Show the race calendar of a season'

    def add_arguments(self, parser):
        parser.add_argument('--year', type=int, default=settings.F1_SEASON_CONFIG['current_season'],
                            help='Season year (defaults to the current season)')

    def handle(self, *args, **options):
        year = options['year']
        races = list(season_calendar(year))
        if not races:
            self.stdout.write(self.style.WARNING(f"No races registered for {year}."))
            return

        self.stdout.write(f"Race calendar {year}:")
        for race in races:
            marker = '' if allows_manual_entry(race.date) else ' [frozen]'
            self.stdout.write(
                f"  {race.gp_number:>2}. {race.name} - {race.circuit.name} "
                f"({race.date or 'TBC'}) [id {race.id}]{marker}"
            )
