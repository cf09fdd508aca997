class StorageError(Exception):
    """Base for all tournament storage errors."""


class UnauthorizedError(StorageError):
    """Caller is not privileged to change tournament data."""


class InvalidTournamentError(StorageError):
    """Payload does not have the shape of a tournament."""


class NotFoundError(StorageError):
    """Round, team or hole not found."""
