import logging

from fastapi import Request
from jose import JWTError, jwt

from app.config import settings
from app.errors import AuthRequired, Forbidden

TOKEN_HEADER_NAMES = ["authorization", "x-auth-token"]
logger = logging.getLogger("neighbornotes.identity")


def _mask_email(email: str | None) -> str:
    value = (email or "").strip()
    if not value:
        return "-"
    local_part, _, domain = value.partition("@")
    if len(local_part) <= 2:
        return f"{local_part}@{domain}" if domain else local_part
    return f"{local_part[:2]}...@{domain}" if domain else f"{local_part[:2]}..."


def _audit_auth_failure(request: Request | None, reason: str, *, claimed_email: str | None = None) -> None:
    if not request:
        logger.warning("AUTH_DENY reason=%s", reason)
        return
    path = getattr(getattr(request, "url", None), "path", "-")
    method = getattr(request, "method", "-")
    client = getattr(request, "client", None)
    ip = getattr(client, "host", "-") if client else "-"
    logger.warning(
        "AUTH_DENY reason=%s method=%s path=%s ip=%s claimed=%s",
        reason,
        method,
        path,
        ip,
        _mask_email(claimed_email),
    )


def _extract_auth_token(request: Request) -> str | None:
    headers = getattr(request, "headers", None)
    if not headers:
        return None
    for name in TOKEN_HEADER_NAMES:
        value = headers.get(name)
        if not value:
            continue
        raw = value.strip()
        if name == "authorization":
            if raw.lower().startswith("bearer "):
                raw = raw.split(" ", 1)[1].strip()
            elif " " in raw:
                # only the Bearer scheme is understood
                continue
        if raw:
            return raw
    return None


class IdentityVerifier:
    """Decides whether a request may act as the email it supplies."""

    def verify(self, request: Request, email: str | None) -> str | None:
        raise NotImplementedError


class TrustedEmailVerifier(IdentityVerifier):
    """Accepts the caller-supplied email without any check.

    The identity provider runs in the client; the backend has nothing to
    verify against, so any caller can act as any email.
    """

    def verify(self, request: Request, email: str | None) -> str | None:
        return email


class JWTEmailVerifier(IdentityVerifier):
    """Requires a bearer token whose ``email`` (or ``sub``) claim matches."""

    def __init__(self, secret: str, algorithm: str = "HS256"):
        self.secret = secret
        self.algorithm = algorithm

    def _token_email(self, request: Request, claimed_email: str) -> str:
        token = _extract_auth_token(request)
        if not token:
            _audit_auth_failure(request, "missing_token", claimed_email=claimed_email)
            raise AuthRequired("Authentication required")
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError:
            _audit_auth_failure(request, "invalid_token", claimed_email=claimed_email)
            raise AuthRequired("Invalid authentication token")
        subject = payload.get("email") or payload.get("sub")
        if not subject:
            _audit_auth_failure(request, "token_missing_email", claimed_email=claimed_email)
            raise AuthRequired("Authentication token has no email")
        return str(subject)

    def verify(self, request: Request, email: str | None) -> str | None:
        if not email:
            return email
        token_email = self._token_email(request, email)
        if token_email.lower() != email.strip().lower():
            _audit_auth_failure(request, "claimed_mismatch", claimed_email=email)
            raise Forbidden("Authenticated user does not match request")
        return email


def build_verifier() -> IdentityVerifier:
    mode = (settings.AUTH_MODE or "trusted").strip().lower()
    if mode == "jwt":
        if not settings.AUTH_JWT_SECRET:
            raise RuntimeError("AUTH_MODE=jwt requires AUTH_JWT_SECRET")
        return JWTEmailVerifier(settings.AUTH_JWT_SECRET, settings.AUTH_JWT_ALGORITHM or "HS256")
    if mode != "trusted":
        raise RuntimeError(f"unknown AUTH_MODE: {settings.AUTH_MODE}")
    return TrustedEmailVerifier()


_verifier: IdentityVerifier | None = None


def get_identity_verifier() -> IdentityVerifier:
    global _verifier
    if _verifier is None:
        _verifier = build_verifier()
    return _verifier

