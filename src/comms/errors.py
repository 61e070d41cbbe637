from __future__ import annotations


class CommsError(Exception):
    """Base for every protocol failure.

    Errors are handed back inside ``Err`` rather than raised; ``ident`` is the
    server name or connection address the failure concerns. Two errors are
    equal when they are of the same kind and carry the same ident.
    """

    def __init__(self, ident: str):
        super().__init__(ident)
        self.ident = ident

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.ident == other.ident  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.ident))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.ident!r})"

    def __str__(self) -> str:
        return f"{type(self).__name__}: {self.ident}"


class ServerLimitReached(CommsError):
    """A post was rejected because the server's quota is used up."""


class UnexpectedHandshake(CommsError):
    """The server has already completed its one handshake."""


class ConnectionExists(CommsError):
    pass


class ConnectionClosed(CommsError):
    pass


class ConnectionNotFound(CommsError):
    pass
