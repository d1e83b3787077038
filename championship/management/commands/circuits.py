from django.conf import settings
from django.core.management.base import BaseCommand

from championship.services.catalog import season_circuits


class Command(BaseCommand):
    help = 'List the circuits used in a season'

    def add_arguments(self, parser):
        parser.add_argument('--year', type=int, default=settings.F1_SEASON_CONFIG['current_season'])

    def handle(self, *args, **options):
        year = options['year']
        circuits = list(season_circuits(year))
        if not circuits:
            self.stdout.write(self.style.WARNING(f"No circuits registered for {year}."))
            return

        self.stdout.write(f"Circuits {year}:")
        for circuit in circuits:
            location = f" - {circuit.location}" if circuit.location else ''
            self.stdout.write(f"  {circuit.name}{location}")
