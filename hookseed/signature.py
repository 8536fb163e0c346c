import re

from hookseed.randomness import RandomSource

SIGNATURE_HEADER = "stripe-signature"
EVENT_TYPE_HEADER = "x-stripe-event-type"
DIGEST_LENGTH = 64

_SIGNATURE_RE = re.compile(r"^t=(?P<timestamp>\d+),v1=(?P<digest>[0-9a-f]{64})$")


def build_signature_header(timestamp: int, digest: str) -> str:
    """Format a signature header value as ``t=<unix-seconds>,v1=<hex digest>``."""
    return f"t={timestamp},v1={digest}"


def random_signature(source: RandomSource) -> str:
    """
    Build a plausibly-shaped signature header for a synthetic delivery.

    The digest is random hex, not an HMAC of the body: receivers that verify
    signatures will reject it.
    """
    return build_signature_header(source.now(), source.hexadecimal(DIGEST_LENGTH))


def parse_signature_header(value: str) -> tuple[int, str]:
    """
    Split a signature header into its timestamp and v1 digest.

    Raises:
        ValueError: If the header is missing or not of the form t=<digits>,v1=<64 hex>.
    """
    if not value:
        raise ValueError("Missing or empty signature header.")

    match = _SIGNATURE_RE.match(value)
    if match is None:
        raise ValueError(f"Malformed signature header: {value!r}")

    return int(match.group("timestamp")), match.group("digest")
