"""Custom exceptions raised while seeding the shop database."""


class SeederError(Exception):
    """Base exception for all seeder errors."""

    pass


class InvalidInputError(SeederError):
    """Raised when the menu choice or record count cannot be used."""

    def __init__(self, message: str, value=None):
        self.value = value
        if value is not None:
            message = f"{message}: {value!r}"
        super().__init__(message)


class MissingDependencyError(SeederError):
    """Raised when an entity needs foreign keys that are not in the database yet."""

    def __init__(self, entity: str, dependency: str):
        self.entity = entity
        self.dependency = dependency
        super().__init__(
            f"Cannot generate {entity}: no {dependency} found in the database"
        )
