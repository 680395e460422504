"""Custom exceptions for signalign."""


class SignAlignError(Exception):
    """Base exception for signalign."""
    pass


class ConfigError(SignAlignError):
    """Invalid configuration or comparison options."""
    pass


class ValidationError(SignAlignError):
    """Malformed input data."""
    pass


class SignNotFoundError(SignAlignError, KeyError):
    """A sign interpretation id is not part of the line it was looked up in."""

    def __init__(self, sign_id: int, line_name: str = ""):
        self.sign_id = sign_id
        self.line_name = line_name
        where = f" in line {line_name!r}" if line_name else ""
        super().__init__(f"Sign interpretation {sign_id} not found{where}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
