import os
from dataclasses import asdict

import pandas as pd
from django.conf import settings
from django.core.management.base import BaseCommand

from championship.services.standings import constructor_standings, driver_standings


class Command(BaseCommand):
    help = 'Export drivers and constructors standings of a season to CSV'

    def add_arguments(self, parser):
        parser.add_argument('--year', type=int, default=settings.F1_SEASON_CONFIG['current_season'])
        parser.add_argument('--output', default='./standings_export',
                            help='Directory the CSV files are written to')
        parser.add_argument('--no-sprints', action='store_true', help='Ignore sprint race points')

    def handle(self, *args, **options):
        year = options['year']
        output_dir = options['output']
        include_sprints = not options['no_sprints']
        os.makedirs(output_dir, exist_ok=True)

        drivers_df = pd.DataFrame(
            [asdict(row) for row in driver_standings(year, include_sprints=include_sprints)],
            columns=['position', 'driver_id', 'name', 'number', 'nationality',
                     'constructor_name', 'total_points', 'wins', 'podiums'],
        )
        drivers_path = os.path.join(output_dir, f'driver_standings_{year}.csv')
        drivers_df.to_csv(drivers_path, index=False)
        self.stdout.write(f"  Exported {len(drivers_df)} drivers to {drivers_path}")

        constructors_df = pd.DataFrame(
            [asdict(row) for row in constructor_standings(year, include_sprints=include_sprints)],
            columns=['position', 'constructor_id', 'name', 'nationality',
                     'total_points', 'wins', 'podiums'],
        )
        constructors_path = os.path.join(output_dir, f'constructor_standings_{year}.csv')
        constructors_df.to_csv(constructors_path, index=False)
        self.stdout.write(f"  Exported {len(constructors_df)} constructors to {constructors_path}")

        self.stdout.write(self.style.SUCCESS(f"Export complete! Data saved to: {output_dir}"))
