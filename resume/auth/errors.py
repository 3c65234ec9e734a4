"""Exception hierarchy for key-set handling and token verification."""


class KeyDecodeError(Exception):
    """A single signing key could not be turned into a public key."""

    code = "key_decode_failed"


class UnsupportedKeyType(KeyDecodeError):
    """The key type is not RSA."""

    code = "unsupported_key_type"


class MalformedKeyEncoding(KeyDecodeError):
    """The modulus or exponent is not valid base64url key material."""

    code = "malformed_key_encoding"


class KeySetError(Exception):
    """The key set could not be fetched or did not yield the wanted key."""

    code = "key_set_error"


class NetworkError(KeySetError):
    """The key-set endpoint could not be reached in time."""

    code = "jwks_network_error"


class UnexpectedStatus(KeySetError):
    """The key-set endpoint answered with a status other than 200."""

    code = "jwks_unexpected_status"

    def __init__(self, status_code: int) -> None:
        super().__init__(f"JWKS endpoint returned status: {status_code}")
        self.status_code = status_code


class KeySetDecodeError(KeySetError):
    """The key-set response body is not a JSON key set."""

    code = "jwks_decode_error"


class KeyNotFound(KeySetError):
    """The key id is absent from a freshly fetched key set."""

    code = "key_not_found"

    def __init__(self, kid: str) -> None:
        super().__init__(f"key with ID {kid} not found")
        self.kid = kid


class TokenVerificationError(Exception):
    """Base class for every bearer-token rejection."""

    code = "token_invalid"


class MalformedToken(TokenVerificationError):
    code = "malformed_token"


class UnsupportedAlgorithm(TokenVerificationError):
    code = "unsupported_algorithm"


class MissingKeyId(TokenVerificationError):
    code = "missing_kid"


class KeyResolutionFailed(TokenVerificationError):
    """The signing key could not be resolved; the cause is chained."""

    code = "key_resolution_failed"


class InvalidSignature(TokenVerificationError):
    code = "invalid_signature"


class ClaimValidationFailed(TokenVerificationError):
    code = "invalid_claims"


class InvalidIssuer(ClaimValidationFailed):
    code = "invalid_issuer"


class InvalidAudience(ClaimValidationFailed):
    code = "invalid_audience"


class ExpiredToken(ClaimValidationFailed):
    code = "token_expired"
