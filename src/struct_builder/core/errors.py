class BuilderError(Exception):
    """Base class for errors raised while deriving or using a builder."""


class UnsupportedShapeError(BuilderError):
    """The input type is not a record with named fields."""

    def __init__(self, type_name: str, reason: str) -> None:
        self.type_name = type_name
        self.reason = reason
        super().__init__(f"{type_name}: unsupported shape ({reason})")


class MissingRequiredFieldError(BuilderError):
    """Raised by a builder's assembly method for the first required field that was never set."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"missing required field: {field_name}")
