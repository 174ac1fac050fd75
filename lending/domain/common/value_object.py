"""
Base class for Value Objects.

Value Objects are immutable objects that are defined by their attributes
rather than by identity. Two value objects are equal if all their
attributes are equal.

Example:
    @dataclass(frozen=True)
    class Isbn(ValueObject):
        value: str

        @classmethod
        def create(cls, raw: str | None) -> "Isbn":
            normalized = _normalize(raw)
            if not _is_valid(normalized):
                raise ValidationError("Invalid ISBN", field="isbn", value=raw)
            return cls(normalized)
"""


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Value Objects are:
    - Immutable (use frozen=True in dataclass)
    - Compared by value (all attributes must match)
    - Created through a validating factory (``create``) that normalizes input

    Subclasses should be decorated with @dataclass(frozen=True, eq=False)
    so equality and hashing come from this base class.
    """

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, *sorted(self.__dict__.items())))

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self.__dict__.items())
        return f"{self.__class__.__name__}({attrs})"

    def __str__(self) -> str:
        return str(self.to_primitive())

    def to_primitive(self) -> object:
        """
        Convert to primitive Python type for serialization.

        Single-value VOs return their only attribute, others a dict.
        """
        values = list(self.__dict__.values())
        if len(values) == 1:
            return values[0]
        return dict(self.__dict__)
