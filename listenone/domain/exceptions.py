class ProviderError(Exception):
    """Base class of every failure raised while talking to a music provider."""

    pass


class ProviderTransportError(ProviderError):
    """Raised on network failures (DNS, TCP, TLS, timeout) or a non-2xx HTTP status."""

    pass


class ProviderDecodeError(ProviderError):
    """Raised when a response does not match the expected JSON schema or HTML structure."""

    pass


class ProviderResponseError(ProviderError):
    """Raised when a well-formed payload carries a non-success business status."""

    pass


class ProviderFeatureNotSupportedError(ProviderError):
    pass


class CryptoError(Exception):
    """Raised when the request signing material cannot be produced."""

    pass


class UnknownProviderError(ValueError):
    pass
