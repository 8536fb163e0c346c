from hookseed.signature import SIGNATURE_HEADER, parse_signature_header


def signature_parts(headers: dict[str, str]) -> tuple[int, str]:
    """
    Extract the timestamp and digest from a delivery's signature header.

    Raises:
        AssertionError: If the header is missing.
        ValueError: If the header is malformed.
    """
    assert SIGNATURE_HEADER in headers, f"Missing {SIGNATURE_HEADER} header: {headers}"
    return parse_signature_header(headers[SIGNATURE_HEADER])
