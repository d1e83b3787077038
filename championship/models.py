from django.db import models


class Season(models.Model):
    year = models.IntegerField(unique=True)

    class Meta:
        ordering = ['-year']

    def __str__(self):
        return str(self.year)


class Circuit(models.Model):
    name = models.CharField(max_length=150)
    location = models.CharField(max_length=150, blank=True, default='')

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class Constructor(models.Model):
    name = models.CharField(max_length=150)
    nationality = models.CharField(max_length=80, blank=True, default='')

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class Driver(models.Model):
    name = models.CharField(max_length=150)
    nationality = models.CharField(max_length=80, blank=True, default='')
    # Car number as printed on the car, e.g. "1" or "01"
    number = models.CharField(max_length=10, blank=True, default='')
    constructor = models.ForeignKey(
        Constructor,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='drivers'
    )

    class Meta:
        ordering = ['name']

    def __str__(self):
        return f"{self.name} #{self.number}" if self.number else self.name


class Race(models.Model):
    season = models.ForeignKey(Season, on_delete=models.CASCADE, related_name='races')
    circuit = models.ForeignKey(Circuit, on_delete=models.PROTECT, related_name='races')
    gp_number = models.IntegerField()
    name = models.CharField(max_length=150)
    date = models.DateField(null=True, blank=True)

    class Meta:
        unique_together = ('season', 'gp_number')
        ordering = ['season__year', 'gp_number']

    def __str__(self):
        return f"{self.season.year} {self.name} (GP {self.gp_number})"


class ResultQuerySet(models.QuerySet):
    def for_race(self, race_id):
        return (
            self.filter(race_id=race_id)
            .select_related('driver', 'driver__constructor')
            .order_by('position')
        )

    def for_season(self, year):
        return self.filter(race__season__year=year)


class RaceClassification(models.Model):
    """Base model for a driver's classification in a race (grand prix or sprint)"""
    position = models.PositiveIntegerField()
    points = models.DecimalField(max_digits=5, decimal_places=2, default=0)
    laps = models.IntegerField(null=True, blank=True)
    # Free-form display string, e.g. "1:32:15.123" or "+5.2s"
    time = models.CharField(max_length=100, null=True, blank=True)
    withdrawn = models.BooleanField(default=False)
    withdrawal_reason = models.CharField(max_length=200, null=True, blank=True)

    objects = ResultQuerySet.as_manager()

    class Meta:
        abstract = True


class Result(RaceClassification):
    race = models.ForeignKey(Race, on_delete=models.CASCADE, related_name='results')
    driver = models.ForeignKey(Driver, on_delete=models.CASCADE, related_name='results')

    class Meta:
        unique_together = ('race', 'driver')
        ordering = ['race', 'position']

    def __str__(self):
        return f"{self.race} - {self.driver} - P{self.position}"


class SprintResult(RaceClassification):
    race = models.ForeignKey(Race, on_delete=models.CASCADE, related_name='sprint_results')
    driver = models.ForeignKey(Driver, on_delete=models.CASCADE, related_name='sprint_results')

    class Meta:
        unique_together = ('race', 'driver')
        ordering = ['race', 'position']

    def __str__(self):
        return f"{self.race} - {self.driver} - Sprint P{self.position}"
