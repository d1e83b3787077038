from datetime import date

from championship.models import Circuit, Constructor, Driver, Race, Season

FREEZE_DATE = date(2025, 1, 7)

SEASON_CONFIG = {
    'freeze_date': FREEZE_DATE,
    'current_season': 2025,
    'grid_size': 20,
}


def create_race(season, circuit, gp_number, race_date, name=None):
    return Race.objects.create(
        season=season,
        circuit=circuit,
        gp_number=gp_number,
        name=name or f"Test GP {gp_number}",
        date=race_date,
    )


class ChampionshipDataMixin:
    """Minimal season: two constructors, three drivers, a frozen race and an editable one."""

    def setUp(self):
        super().setUp()
        self.season = Season.objects.create(year=2025)
        self.circuit = Circuit.objects.create(name='Test Circuit', location='Nowhere')
        self.red = Constructor.objects.create(name='Red Team', nationality='Austrian')
        self.blue = Constructor.objects.create(name='Blue Team', nationality='British')
        self.driver_a = Driver.objects.create(name='Driver A', nationality='Dutch', number='1', constructor=self.red)
        self.driver_b = Driver.objects.create(name='Driver B', nationality='British', number='44', constructor=self.blue)
        self.driver_c = Driver.objects.create(name='Driver C', nationality='Spanish', number='14', constructor=self.blue)

        self.frozen_race = create_race(self.season, self.circuit, 1, date(2025, 1, 6), name='Frozen GP')
        self.open_race = create_race(self.season, self.circuit, 2, date(2025, 3, 16), name='Open GP')
