import json
import os

import pandas as pd
from django.core.management.base import BaseCommand, CommandError

from championship.exceptions import NotFound, PersistenceFailure, PolicyViolation, ValidationError
from championship.services.results import ResultEntry, ingest_race_results

RESULT_COLUMNS = ['driver_id', 'position', 'laps', 'time', 'withdrawn', 'withdrawal_reason', 'has_fastest_lap']


def load_entries(path):
    """Read result entries from a JSON list or a CSV file with RESULT_COLUMNS headers."""
    try:
        if path.lower().endswith('.json'):
            with open(path, 'r', encoding='utf-8') as f:
                rows = json.load(f)
        else:
            rows = pd.read_csv(path, dtype=str, keep_default_na=False).to_dict('records')
    except ValueError as e:
        # json.JSONDecodeError and pandas ParserError
        raise ValidationError(f"Could not parse {path}: {e}") from e

    if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
        raise ValidationError('Results file must contain a list of entries')
    return [ResultEntry.from_dict(row) for row in rows]


class Command(BaseCommand):
    help = 'Enter the full classification of a race, replacing any previous results'

    def add_arguments(self, parser):
        parser.add_argument('race_id', type=int)
        parser.add_argument('file', help=f"JSON or CSV file with columns: {', '.join(RESULT_COLUMNS)}")
        parser.add_argument('--sprint', action='store_true', help='Enter sprint results')

    def handle(self, *args, **options):
        path = options['file']
        if not os.path.exists(path):
            raise CommandError(f"Results file not found: {path}")

        try:
            entries = load_entries(path)
            written = ingest_race_results(options['race_id'], entries, sprint=options['sprint'])
        except (NotFound, PersistenceFailure, PolicyViolation, ValidationError) as e:
            raise CommandError(str(e))

        skipped = len(entries) - written
        if skipped:
            self.stdout.write(self.style.WARNING(f"{skipped} entries skipped (unknown driver)"))
        self.stdout.write(self.style.SUCCESS(f"Saved {written} results for race {options['race_id']}"))
