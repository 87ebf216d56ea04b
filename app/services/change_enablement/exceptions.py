"""Errors raised by the change enablement core."""


class InvalidChangeInputError(ValueError):
    """A core function was called with input outside its contract."""
