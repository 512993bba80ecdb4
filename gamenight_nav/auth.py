from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol


class TokenVerifier(Protocol):
    def __call__(self, token: str) -> str | None:
        """Return the role bound to ``token``, or ``None`` when the token is unknown."""


class StaticTokenVerifier:
    """Verifies bearer tokens against a fixed token -> role mapping."""

    def __init__(self, tokens: Mapping[str, str]) -> None:
        self.tokens = dict(tokens)

    def __call__(self, token: str) -> str | None:
        return self.tokens.get(token)


@dataclass
class AuthResult:
    ok: bool
    status: int = 200
    message: str = ""


def bearer_token(headers: Mapping[str, str]) -> str | None:
    header = headers.get("Authorization") or ""
    if not header.startswith("Bearer "):
        return None
    return header[len("Bearer "):].strip() or None


def require_admin(headers: Mapping[str, str], verify: TokenVerifier) -> AuthResult:
    token = bearer_token(headers)
    if not token:
        return AuthResult(False, 401, "Missing authorization token.")
    role = verify(token)
    if role is None:
        return AuthResult(False, 401, "Invalid authorization token.")
    if role != "admin":
        return AuthResult(False, 403, "Admin access required.")
    return AuthResult(True)
