"""Token signing capability contract."""

from typing import Any, Dict, Mapping, Protocol, runtime_checkable


@runtime_checkable
class TokenSigner(Protocol):
    """Converts a claim set into a signed compact token and back.

    Every implementation stamps ``exp`` at sign time and refuses, on verify,
    any token whose header algorithm is outside its own algorithm family.
    """

    @property
    def algorithm(self) -> str:
        """Algorithm written to the header of issued tokens."""
        ...

    def sign(self, claims: Mapping[str, Any]) -> str:
        """Sign ``claims`` plus a fresh ``exp``.

        Raises:
            SigningFailure: If the signing primitive fails
        """
        ...

    def verify(self, token: str) -> Dict[str, Any]:
        """Return the decoded claims of a valid token.

        Raises:
            TokenInvalid: For any verification failure
        """
        ...
