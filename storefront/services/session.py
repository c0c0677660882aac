import uuid
from typing import Optional


def resolve_session_id(provided: Optional[str] = None) -> str:
    """Reuse the caller's session id when given, otherwise mint a new one.

    No format checks are made; any non-empty string identifies a cart.
    """
    if provided:
        return provided
    return str(uuid.uuid4())
