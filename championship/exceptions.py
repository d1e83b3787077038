"""Errors raised by the championship services."""


class ChampionshipError(Exception):
    """Base exception for all championship service errors."""


class NotFound(ChampionshipError):
    """Raised when a season, race or driver id does not resolve."""

    def __init__(self, entity, key):
        self.entity = entity
        self.key = key
        super().__init__(f"No {entity} found for {key!r}")


class PolicyViolation(ChampionshipError):
    """Raised when an operation is not allowed, e.g. editing results of a frozen race."""


class ValidationError(ChampionshipError):
    """Raised when a result entry is malformed."""


class NoResultsToDelete(ChampionshipError):
    """Raised when a results deletion finds nothing to delete."""

    def __init__(self, race_id):
        self.race_id = race_id
        super().__init__(f"Race {race_id} has no results to delete")


class PersistenceFailure(ChampionshipError):
    """Raised when the database rejects a write; the transaction is rolled back."""

    def __init__(self, message, entity=None):
        self.entity = entity
        super().__init__(message)
