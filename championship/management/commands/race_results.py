from django.core.management.base import BaseCommand, CommandError

from championship.exceptions import NotFound
from championship.services.catalog import get_race
from championship.services.results import race_results


class Command(BaseCommand):
    help = 'Show the classification of a race'

    def add_arguments(self, parser):
        parser.add_argument('race_id', type=int)
        parser.add_argument('--sprint', action='store_true', help='Show the sprint classification')

    def handle(self, *args, **options):
        try:
            race = get_race(options['race_id'])
        except NotFound as e:
            raise CommandError(str(e))

        results = list(race_results(race.id, sprint=options['sprint']))
        if not results:
            self.stdout.write(self.style.WARNING(f"No results for {race.name}."))
            return

        kind = 'Sprint' if options['sprint'] else 'Race'
        self.stdout.write(f"{kind} results: {race.name} ({race.date})")
        for result in results:
            driver = result.driver
            team = driver.constructor.name if driver.constructor else '-'
            if result.withdrawn:
                outcome = f"DNF ({result.withdrawal_reason or 'no reason given'})"
            else:
                outcome = result.time or ''
            self.stdout.write(
                f"  P{result.position:<3} {driver.name:<25} {team:<20} "
                f"{result.laps if result.laps is not None else '-':>3} laps  "
                f"{outcome:<20} {result.points} pts"
            )
