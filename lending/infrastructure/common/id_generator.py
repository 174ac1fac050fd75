import uuid


class UuidIdGenerator:
    """Generates identifiers as uppercase hex of a random UUID."""

    def new(self) -> str:
        return uuid.uuid4().hex.upper()
