# storefront/domain/errors.py


class NotFoundError(ValueError):
    """Operacja na sklepie dla id, które nie istnieje."""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")
