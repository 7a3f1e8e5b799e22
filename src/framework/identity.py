"""
Identities taking part in a web service request.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """
    The requester sent the call; the registered identity is the one the call
    is made on behalf of. Both are opaque tokens (an address, or an
    "<address>::<account>" composite).
    """

    requester: str
    registered: str

    @classmethod
    def from_request(cls, requester: str, registered: str = "") -> "Identity":
        """Build the pair from caller input.

        An empty registered identity defaults to the requester. A registered
        identity starting with "self" is an alias of the requester:
        "self::<account>" becomes "<requester>::<account>".
        """
        if not registered:
            registered = requester

        if registered[:4].lower() == "self":
            pos = registered.find("::")
            if pos != -1:
                registered = f"{requester}::{registered[pos + 2:]}"
            else:
                registered = requester

        return cls(requester=requester, registered=registered)

    @property
    def is_delegated(self) -> bool:
        return self.registered != self.requester
