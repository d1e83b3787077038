from datetime import date
from decimal import Decimal

from django.test import TestCase

from championship.exceptions import NotFound, PolicyViolation
from championship.models import Circuit, Driver, Race, Result, Season
from championship.services.seasons import (
    copy_season_structure,
    delete_season,
    initialize_season,
    season_statistics,
)
from championship.tests.fixtures import create_race


class SeasonServiceTests(TestCase):
    def setUp(self):
        self.season = Season.objects.create(year=2024)
        self.circuit = Circuit.objects.create(name='Sakhir', location='Bahrain')
        self.other_circuit = Circuit.objects.create(name='Jeddah', location='Saudi Arabia')
        self.race_1 = create_race(self.season, self.circuit, 1, date(2024, 3, 2), name='Bahrain GP')
        self.race_2 = create_race(self.season, self.other_circuit, 2, date(2024, 2, 29), name='Leap GP')
        self.driver = Driver.objects.create(name='Driver', number='3')

    def test_copy_structure_creates_target_season(self):
        copied = copy_season_structure(2024, 2025)

        self.assertEqual(copied, 2)
        races = list(Race.objects.filter(season__year=2025).order_by('gp_number'))
        self.assertEqual([r.name for r in races], ['Bahrain GP', 'Leap GP'])
        self.assertEqual(races[0].circuit, self.circuit)
        self.assertEqual(races[0].date, date(2025, 3, 2))
        self.assertEqual(races[1].date, date(2025, 2, 28))

    def test_copy_structure_does_not_copy_results(self):
        Result.objects.create(race=self.race_1, driver=self.driver, position=1, points=Decimal('25'))

        copy_season_structure(2024, 2025)

        self.assertFalse(Result.objects.filter(race__season__year=2025).exists())

    def test_copy_into_season_with_races(self):
        copy_season_structure(2024, 2025)

        with self.assertRaises(PolicyViolation):
            copy_season_structure(2024, 2025)
        self.assertEqual(Race.objects.filter(season__year=2025).count(), 2)

    def test_copy_season_onto_itself(self):
        with self.assertRaises(PolicyViolation):
            copy_season_structure(2024, 2024)
        self.assertEqual(Race.objects.filter(season__year=2024).count(), 2)

    def test_copy_from_unknown_season(self):
        with self.assertRaises(NotFound):
            copy_season_structure(1999, 2000)

    def test_copy_from_empty_season_creates_nothing(self):
        Season.objects.create(year=2010)

        self.assertEqual(copy_season_structure(2010, 2011), 0)
        self.assertFalse(Season.objects.filter(year=2011).exists())

    def test_initialize_season_from_previous_year(self):
        self.assertTrue(initialize_season(2025))
        self.assertEqual(Race.objects.filter(season__year=2025).count(), 2)

    def test_initialize_season_only_once(self):
        initialize_season(2025)

        self.assertFalse(initialize_season(2025))
        self.assertEqual(Race.objects.filter(season__year=2025).count(), 2)

    def test_season_statistics(self):
        other = Driver.objects.create(name='Other', number='4')
        Result.objects.create(race=self.race_1, driver=self.driver, position=1, points=Decimal('25'))
        Result.objects.create(race=self.race_1, driver=other, position=2, points=Decimal('18'))
        Result.objects.create(race=self.race_2, driver=self.driver, position=1, points=Decimal('25'))

        stats = season_statistics(2024)

        self.assertEqual((stats.races, stats.results, stats.drivers), (2, 3, 2))

    def test_delete_season_with_races_requires_cascade(self):
        with self.assertRaises(PolicyViolation):
            delete_season(2024)

        self.assertTrue(Season.objects.filter(year=2024).exists())

    def test_delete_season_cascade_removes_races_and_results(self):
        Result.objects.create(race=self.race_1, driver=self.driver, position=1, points=Decimal('25'))

        self.assertEqual(delete_season(2024, cascade=True), 2)
        self.assertFalse(Race.objects.exists())
        self.assertFalse(Result.objects.exists())

    def test_delete_empty_season(self):
        Season.objects.create(year=2030)

        self.assertEqual(delete_season(2030), 0)
        self.assertFalse(Season.objects.filter(year=2030).exists())

    def test_delete_unknown_season(self):
        with self.assertRaises(NotFound):
            delete_season(1950)
