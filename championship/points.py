from decimal import Decimal

# Grand prix points for the top 10 finishers
POINTS_BY_POSITION = {
    1: Decimal('25'),
    2: Decimal('18'),
    3: Decimal('15'),
    4: Decimal('12'),
    5: Decimal('10'),
    6: Decimal('8'),
    7: Decimal('6'),
    8: Decimal('4'),
    9: Decimal('2'),
    10: Decimal('1'),
}

# Sprint points for the top 8 finishers
SPRINT_POINTS_BY_POSITION = {
    1: Decimal('8'),
    2: Decimal('7'),
    3: Decimal('6'),
    4: Decimal('5'),
    5: Decimal('4'),
    6: Decimal('3'),
    7: Decimal('2'),
    8: Decimal('1'),
}

# Extra point for the fastest lap, only when finishing in the top 10
FASTEST_LAP_POINTS = Decimal('1')

ZERO = Decimal('0')


def points(position):
    """Points awarded for a grand prix finishing position (0 outside the top 10)."""
    return POINTS_BY_POSITION.get(position, ZERO)


def is_point_scoring_position(position):
    return 1 <= position <= 10


def calculate_points(position, has_fastest_lap=False):
    """
    Total grand prix points for a classification.

    The fastest lap bonus is only added when the position itself scores.
    """
    base = points(position)
    if has_fastest_lap and is_point_scoring_position(position):
        return base + FASTEST_LAP_POINTS
    return base


def sprint_points(position):
    return SPRINT_POINTS_BY_POSITION.get(position, ZERO)
