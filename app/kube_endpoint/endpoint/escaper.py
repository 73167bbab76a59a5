"""
Percent-encoding of single URL components.

Everything outside the unreserved set is escaped, including '/', so an
escaped value can never introduce a new path segment or query parameter.
"""

from typing import Union
from urllib.parse import quote

from kube_endpoint.endpoint.types import BufferTooSmallError, MalformedInputError


# Characters copied verbatim besides ASCII letters and digits
UNRESERVED_MARKS = "-_.!~*'()"

RawIdentifier = Union[str, bytes, bytearray]


def _to_bytes(value: RawIdentifier) -> bytes:
    """
    Encode an identifier as bytes, rejecting embedded NULs.

    str values are encoded as UTF-8 with surrogateescape, so undecodable
    bytes from argv or the environment ('\\udcff' for 0xFF) map back to the
    original byte.
    """
    if isinstance(value, str):
        data = value.encode("utf-8", "surrogateescape")
    else:
        data = bytes(value)
    if b"\0" in data:
        raise MalformedInputError("identifier contains an embedded NUL byte")
    return data


def escape_url_component(value: RawIdentifier, capacity: int) -> str:
    """
    Percent-encode a value for use as one path or query component.

    Args:
        value: Raw identifier; str values are encoded as UTF-8
        capacity: Output capacity in bytes, including the terminator

    Returns:
        The escaped component

    Raises:
        BufferTooSmallError: If the escaped value plus terminator exceeds capacity
        MalformedInputError: If value contains an embedded NUL or a surrogate
            that is not an escaped byte

    Examples:
        >>> escape_url_component("/bin/bash", 2048)
        '%2Fbin%2Fbash'
    """
    try:
        data = _to_bytes(value)
    except UnicodeEncodeError as e:
        raise MalformedInputError(f"identifier is not encodable: {e}") from e

    # quote() keeps ASCII letters and digits, the marks and nothing else;
    # hex digits are uppercase
    escaped = quote(data, safe=UNRESERVED_MARKS)

    required = len(escaped) + 1
    if required > capacity:
        raise BufferTooSmallError(required, capacity, what="escaped component")
    return escaped
