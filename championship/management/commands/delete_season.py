from django.core.management.base import BaseCommand, CommandError

from championship.exceptions import NotFound, PersistenceFailure, PolicyViolation
from championship.services.seasons import delete_season


class Command(BaseCommand):
    help = 'Delete a season; with --cascade its races and results go too'

    def add_arguments(self, parser):
        parser.add_argument('year', type=int)
        parser.add_argument('--cascade', action='store_true',
                            help='Also delete the races and results of the season')
        parser.add_argument('--yes', action='store_true', help='Do not ask for confirmation')

    def handle(self, *args, **options):
        year = options['year']
        if not options['yes']:
            answer = input(f"Delete season {year}? [y/N] ")
            if answer.strip().lower() not in ('y', 'yes'):
                self.stdout.write('Cancelled.')
                return

        try:
            races = delete_season(year, cascade=options['cascade'])
        except (NotFound, PersistenceFailure, PolicyViolation) as e:
            raise CommandError(str(e))

        self.stdout.write(self.style.SUCCESS(f"Season {year} deleted ({races} races removed)"))
