from django.core.management.base import BaseCommand, CommandError

from championship.exceptions import NoResultsToDelete, NotFound, PersistenceFailure, PolicyViolation
from championship.services.catalog import get_race
from championship.services.results import check_editable, delete_race_results, race_results


class Command(BaseCommand):
    help = 'Delete every result of an editable race'

    def add_arguments(self, parser):
        parser.add_argument('race_id', type=int)
        parser.add_argument('--sprint', action='store_true', help='Delete sprint results')
        parser.add_argument('--yes', action='store_true', help='Do not ask for confirmation')

    def handle(self, *args, **options):
        race_id = options['race_id']
        sprint = options['sprint']

        try:
            race = get_race(race_id)
            check_editable(race)
        except (NotFound, PolicyViolation) as e:
            raise CommandError(str(e))

        count = race_results(race_id, sprint=sprint).count()
        if not count:
            self.stdout.write(self.style.WARNING(f"{race.name} has no results to delete."))
            return

        if not options['yes']:
            answer = input(f"Delete {count} results of {race.name}? [y/N] ")
            if answer.strip().lower() not in ('y', 'yes'):
                self.stdout.write('Cancelled.')
                return

        try:
            deleted = delete_race_results(race_id, sprint=sprint)
        except (NotFound, PersistenceFailure, PolicyViolation, NoResultsToDelete) as e:
            raise CommandError(str(e))

        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted} results from {race.name}"))
