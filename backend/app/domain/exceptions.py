"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when a write collides with a unique constraint.

    ``fields`` lists every column named by the conflicting constraint so a
    caller can point the user at the clashing values.
    """

    def __init__(self, entity_type: str, field: str | list[str], value: str = ""):
        self.entity_type = entity_type
        self.fields = [field] if isinstance(field, str) else list(field)
        self.field = ", ".join(self.fields)
        self.value = value
        if value:
            message = f"{entity_type} with {self.field}='{value}' already exists"
        else:
            message = f"{entity_type} with the same {self.field} already exists"
        super().__init__(message)


class InvalidCategoryError(Exception):
    """Raised when a village information category tag is not recognised."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"Category '{category}' is not recognized")
