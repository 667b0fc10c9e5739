"""PKCE (Proof Key for Code Exchange) helpers.

Reference: https://www.oauth.com/playground/authorization-code-with-pkce.html
RFC 7636: https://datatracker.ietf.org/doc/html/rfc7636
"""

import base64
import hashlib
import secrets

from pydantic import BaseModel, Field

# RFC 7636 section 4.1 bounds for the verifier length
MIN_VERIFIER_LENGTH = 43
MAX_VERIFIER_LENGTH = 128

# Unreserved characters allowed in a code verifier
VERIFIER_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~"

CHALLENGE_METHOD = "S256"


class PkceCodes(BaseModel):
    """A code verifier together with its derived challenge."""

    code_verifier: str = Field(..., description="High-entropy random secret")
    code_challenge: str = Field(
        ..., description="Base64url-encoded SHA-256 of the verifier, unpadded"
    )
    code_challenge_method: str = Field(
        CHALLENGE_METHOD, description="Transformation applied to the verifier"
    )


def generate_code_verifier(length: int = MIN_VERIFIER_LENGTH) -> str:
    """Generate a random PKCE code verifier.

    Args:
        length: Desired verifier length. Values outside 43..128 are clamped.

    Returns:
        A string of ``length`` characters drawn from the unreserved set
        ``A-Z a-z 0-9 - . _ ~``
    """
    length = max(MIN_VERIFIER_LENGTH, min(length, MAX_VERIFIER_LENGTH))
    return "".join(secrets.choice(VERIFIER_CHARS) for _ in range(length))


def generate_code_challenge(code_verifier: str) -> str:
    """Derive the S256 code challenge for a verifier."""
    digest = hashlib.sha256(code_verifier.encode("ascii")).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


def generate_pkce_pair(length: int = MIN_VERIFIER_LENGTH) -> PkceCodes:
    """Generate a verifier and its S256 challenge."""
    verifier = generate_code_verifier(length)
    return PkceCodes(
        code_verifier=verifier,
        code_challenge=generate_code_challenge(verifier),
    )
