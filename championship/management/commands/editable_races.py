from django.conf import settings
from django.core.management.base import BaseCommand

from championship.editability import freeze_message
from championship.services.results import editable_races


class Command(BaseCommand):
    help = 'List the races of a season that accept manually entered results'

    def add_arguments(self, parser):
        parser.add_argument('--year', type=int, default=settings.F1_SEASON_CONFIG['current_season'])

    def handle(self, *args, **options):
        self.stdout.write(freeze_message())
        races = editable_races(options['year'])
        if not races:
            self.stdout.write(self.style.WARNING(f"No editable races in {options['year']}."))
            return

        for race in races:
            self.stdout.write(f"  [{race.id}] GP {race.gp_number}: {race.name} ({race.date})")
