"""
Freeze-date policy for manually entered results.

Races dated before the freeze date belong to the imported base dataset and
are read-only. Races on or after it accept results typed in by the user.
"""

from django.conf import settings


def get_freeze_date():
    return settings.F1_SEASON_CONFIG['freeze_date']


def is_after_cutoff(day):
    return day > get_freeze_date()


def allows_manual_entry(race_date):
    """True when results for a race held on ``race_date`` may be created, replaced or deleted."""
    if race_date is None:
        return False
    return is_after_cutoff(race_date) or race_date == get_freeze_date()


def freeze_message():
    return (
        f"Project freeze date: {get_freeze_date().isoformat()}\n"
        "Races held on or after this date accept manually entered results."
    )
