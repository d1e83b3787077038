from decimal import Decimal

from django.test import SimpleTestCase

from championship.points import (
    calculate_points,
    is_point_scoring_position,
    points,
    sprint_points,
)


class PointsTableTests(SimpleTestCase):
    def test_top_ten_positions_score(self):
        expected = [25, 18, 15, 12, 10, 8, 6, 4, 2, 1]
        for position, value in enumerate(expected, 1):
            self.assertEqual(calculate_points(position, False), Decimal(value))
            self.assertEqual(points(position), Decimal(value))

    def test_positions_outside_top_ten_do_not_score(self):
        for position in (0, 11, 20, -1):
            self.assertEqual(calculate_points(position, False), Decimal('0'))

    def test_fastest_lap_bonus(self):
        self.assertEqual(calculate_points(1, True), Decimal('26'))
        self.assertEqual(calculate_points(3, True), Decimal('16'))
        self.assertEqual(calculate_points(10, True), Decimal('2'))

    def test_no_fastest_lap_bonus_outside_top_ten(self):
        self.assertEqual(calculate_points(11, True), Decimal('0'))
        self.assertEqual(calculate_points(0, True), Decimal('0'))
        self.assertEqual(calculate_points(-3, True), Decimal('0'))

    def test_point_scoring_positions(self):
        for position in range(1, 11):
            self.assertTrue(is_point_scoring_position(position))
        for position in (-1, 0, 11, 20, 99):
            self.assertFalse(is_point_scoring_position(position))

    def test_sprint_points(self):
        self.assertEqual(sprint_points(1), Decimal('8'))
        self.assertEqual(sprint_points(8), Decimal('1'))
        self.assertEqual(sprint_points(9), Decimal('0'))
