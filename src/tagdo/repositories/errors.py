"""Repository error taxonomy shared by the todo and label repositories.

Callers only ever see these types from a repository method:

- NotFoundError: the requested entity does not exist
- DuplicateError: a label with the same name already exists
- UnexpectedError: any storage failure not classified above
"""


class RepositoryError(Exception):
    """Base class for all repository errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(RepositoryError):
    """Raised when no entity with the requested id exists."""

    def __init__(self, entity_id: int):
        self.id = entity_id
        super().__init__(f"NotFound, id is {entity_id}")


class DuplicateError(RepositoryError):
    """Raised when creating a label whose name is already taken.

    Carries the id of the label that already holds the name.
    """

    def __init__(self, entity_id: int):
        self.id = entity_id
        super().__init__(f"Duplicate data, id is {entity_id}")


class UnexpectedError(RepositoryError):
    """Raised for storage failures (connectivity, constraints, etc.)."""

    def __init__(self, message: str):
        super().__init__(f"Unexpected Error: [{message}]")
        self.detail = message


class RowFoldError(AssertionError):
    """Folding produced a different number of entities than required.

    Raised when join rows fold into zero or several todos where one was expected.
    """
