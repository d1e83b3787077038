from django.core.management.base import BaseCommand, CommandError

from championship.exceptions import NotFound, PersistenceFailure, PolicyViolation
from championship.services.seasons import copy_season_structure, initialize_season


class Command(BaseCommand):
    help = "Copy a season's race calendar into another season"

    def add_arguments(self, parser):
        parser.add_argument('target', type=int, help='Season to create or fill')
        parser.add_argument('--source', type=int, default=None,
                            help='Season to copy from; without it the previous season is used '
                                 'and nothing happens if the target already has races')

    def handle(self, *args, **options):
        source, target = options['source'], options['target']

        try:
            if source is None:
                if initialize_season(target):
                    self.stdout.write(self.style.SUCCESS(f"Season {target} initialized from {target - 1}"))
                else:
                    self.stdout.write(self.style.WARNING(f"Season {target} was not initialized."))
                return
            copied = copy_season_structure(source, target)
        except (NotFound, PersistenceFailure, PolicyViolation) as e:
            raise CommandError(str(e))

        if not copied:
            self.stdout.write(self.style.WARNING(f"Season {source} has no races to copy."))
            return
        self.stdout.write(self.style.SUCCESS(f"Copied {copied} races from {source} to {target}"))
