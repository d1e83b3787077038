from django.conf import settings
from django.core.management.base import BaseCommand

from championship.services.standings import constructor_standings, driver_standings


class Command(BaseCommand):
    help = 'Show the drivers or constructors championship table of a season'

    def add_arguments(self, parser):
        parser.add_argument('--year', type=int, default=settings.F1_SEASON_CONFIG['current_season'])
        parser.add_argument('--constructors', action='store_true',
                            help='Show the constructors championship instead of the drivers one')
        parser.add_argument('--no-sprints', action='store_true',
                            help='Ignore sprint race points')

    def handle(self, *args, **options):
        year = options['year']
        include_sprints = not options['no_sprints']

        if options['constructors']:
            rows = constructor_standings(year, include_sprints=include_sprints)
            title = f"Constructors standings {year}"
        else:
            rows = driver_standings(year, include_sprints=include_sprints)
            title = f"Drivers standings {year}"

        if not rows:
            self.stdout.write(self.style.WARNING(f"No standings data for {year}."))
            return

        self.stdout.write(title)
        self.stdout.write(f"{'Pos':>3}  {'Name':<28} {'Pts':>7} {'Wins':>4} {'Pod':>4}")
        for row in rows:
            if options['constructors']:
                name = row.name
            else:
                name = f"#{row.number} {row.name}" if row.number else row.name
                if row.constructor_name:
                    name = f"{name} ({row.constructor_name})"
            self.stdout.write(
                f"{row.position:>3}  {name:<28} {row.total_points:>7} {row.wins:>4} {row.podiums:>4}"
            )
