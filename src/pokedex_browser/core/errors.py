"""Exception types shared across the core."""


class DecodeError(ValueError):
    """Raised when a JSON value does not have the expected shape.

    Args:
        message: What was wrong with the value.
        path: Location of the offending value, outermost first.
    """

    def __init__(self, message: str, path: tuple[str | int, ...] = ()) -> None:
        self.message = message
        self.path = path
        super().__init__(self._format())

    def _format(self) -> str:
        if not self.path:
            return self.message
        where = "".join(f"[{p}]" if isinstance(p, int) else f".{p}" for p in self.path)
        return f"at {where.lstrip('.')}: {self.message}"

    def within(self, *outer: str | int) -> "DecodeError":
        """Return a copy of this error located below ``outer``."""
        return DecodeError(self.message, outer + self.path)


class TransportError(RuntimeError):
    """Raised by the gateway for any failed fetch, including undecodable bodies."""


class TreeParseError(ValueError):
    """Raised when a raw payload cannot be shown as a JSON tree."""
