"""Bearer credential extraction from the Authorization header."""

_BEARER_PREFIX = "bearer "


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the raw token after a case-insensitive ``Bearer `` prefix, else ``None``.

    No validity judgment happens here; an absent token is left for the
    identity resolver to reject.
    """
    if not authorization or not authorization.lower().startswith(_BEARER_PREFIX):
        return None

    token = authorization[len(_BEARER_PREFIX):]
    return token or None


__all__ = ["extract_bearer_token"]
