"""Claims customizer extension point."""

from typing import Any, Callable, Dict

from .auth_user import AuthUser

# Called during login with the authenticated user and the mutable claim set,
# after ``sub`` and ``username`` are filled in and before signing. Raising
# aborts the login. ``exp`` is always overwritten by the signer.
ClaimsCustomizer = Callable[[AuthUser, Dict[str, Any]], None]
