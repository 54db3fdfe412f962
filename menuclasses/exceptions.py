class MenuClassesError(Exception):
    """Base class for errors raised while merging menu attributes."""


class InvalidClassValue(MenuClassesError, TypeError):
    """An override option has a shape the merger cannot read."""

    def __init__(self, key, value, expected="a string or a sequence of strings"):
        self.key = key
        self.value = value
        super().__init__(
            f"Menu option {key!r} must be {expected}, got {type(value).__name__}"
        )
