"""Credential forwarding dependencies for FastAPI."""
from typing import Annotated

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# HTTP Bearer scheme; a missing token is normal for anonymous test takers
security = HTTPBearer(auto_error=False)


async def get_forwarded_credentials(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    cookie: Annotated[str | None, Header()] = None,
) -> dict[str, str]:
    """Collect the caller's auth headers so they can be replayed to the content API.

    Returns an empty dict when the caller is anonymous. Tokens are not
    validated here; the content API decides whether the session exists.
    """
    headers: dict[str, str] = {}
    if credentials is not None:
        headers["Authorization"] = f"{credentials.scheme} {credentials.credentials}"
    if cookie:
        headers["Cookie"] = cookie
    return headers
