"""API Dependencies — FastAPI providers for app-scoped services and bearer auth.

Invariants:
    - Store, issuer and rewriter live on app.state (built once by create_app)
    - require_bearer_token raises UnauthorizedError for missing, malformed,
      badly-signed or expired tokens, one outcome for all

Design Decisions:
    - HTTPBearer(auto_error=False): missing header goes through our error
      envelope instead of FastAPI's default 403
"""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.errors import UnauthorizedError
from app.core.todo_store import TodoStore
from app.services.text_rewriter import TextRewriter
from app.services.token_issuer import TokenIssuer

_bearer_scheme = HTTPBearer(auto_error=False)


def get_todo_store(request: Request) -> TodoStore:
    return request.app.state.todo_store


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_text_rewriter(request: Request) -> TextRewriter:
    return request.app.state.text_rewriter


def require_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> dict:
    """Guard for protected routes. Returns the verified token claims."""
    if credentials is None:
        raise UnauthorizedError("Missing bearer token")
    return issuer.verify(credentials.credentials)
