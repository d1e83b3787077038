from django.conf import settings
from django.core.management.base import BaseCommand

from championship.services.seasons import season_statistics


class Command(BaseCommand):
    help = 'Show race, result and driver counts of a season'

    def add_arguments(self, parser):
        parser.add_argument('--year', type=int, default=settings.F1_SEASON_CONFIG['current_season'])

    def handle(self, *args, **options):
        stats = season_statistics(options['year'])
        self.stdout.write(f"Season {stats.year}")
        self.stdout.write(f"  Races:   {stats.races}")
        self.stdout.write(f"  Results: {stats.results}")
        self.stdout.write(f"  Drivers: {stats.drivers}")
