"""OAuth 1.0a request signing (HMAC-SHA1, consumer-only flow)."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from oauthlib.common import UNICODE_ASCII_CHARACTER_SET, generate_token
from oauthlib.oauth1.rfc5849 import signature, utils

NONCE_LENGTH = 26


def percent_encode(value: object) -> str:
    """Percent-encode per RFC 3986, leaving only unreserved characters literal."""
    return utils.escape(str(value))


def normalize_params(params: Mapping[str, object]) -> str:
    """Return encoded ``key=value`` pairs sorted by key and joined by ``&``."""
    return signature.normalize_parameters(
        [(str(key), str(value)) for key, value in params.items()]
    )


def signature_base_string(
    method: str, base_url: str, params: Mapping[str, object]
) -> str:
    """Build the OAuth signature base string."""
    return signature.signature_base_string(
        method, signature.base_string_uri(base_url), normalize_params(params)
    )


def sign(
    method: str,
    base_url: str,
    params: Mapping[str, object],
    consumer_secret: str,
) -> str:
    """Return the base64 HMAC-SHA1 signature for a request.

    No token secret is involved, so the signing key is the consumer secret
    followed by ``&``.
    """
    return signature.sign_hmac_sha1(
        signature_base_string(method, base_url, params), consumer_secret, None
    )


@dataclass(frozen=True)
class SignatureRequest:
    """Inputs for a single signature computation."""

    method: str
    base_url: str
    consumer_secret: str
    params: Mapping[str, str] = field(default_factory=dict)

    def sign(self) -> str:
        """Sign this request."""
        return sign(self.method, self.base_url, self.params, self.consumer_secret)

    def signed_params(self) -> dict[str, str]:
        """Return a copy of the params with ``oauth_signature`` added."""
        return {**self.params, "oauth_signature": self.sign()}


def generate_nonce(length: int = NONCE_LENGTH) -> str:
    """Return a random alphanumeric nonce from a secure source."""
    return generate_token(length=length, chars=UNICODE_ASCII_CHARACTER_SET)
