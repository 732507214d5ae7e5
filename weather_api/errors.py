"""Error types raised by the forecast core."""


class InvalidArgumentError(ValueError):
    """A caller passed an argument outside the operation's preconditions."""
