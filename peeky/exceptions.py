"""Domain exceptions raised by the data-access services."""


class NotFoundError(LookupError):
    """Raised when an update or delete targets an id that does not exist."""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")
