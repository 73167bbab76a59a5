"""
Query parameter appending.

Parameters are appended as <delim><name>=<escaped value>, where the
delimiter opens the query string with '?' the first time and joins with
'&' afterwards.
"""

from kube_endpoint.config.models import DEFAULT_MAX_LENGTH
from kube_endpoint.endpoint.escaper import RawIdentifier, escape_url_component
from kube_endpoint.endpoint.types import BufferTooSmallError, EndpointBuffer
from kube_endpoint.utils import get_logger

logger = get_logger(__name__)


def append_endpoint_param(
    buffer: EndpointBuffer,
    name: str,
    value: RawIdentifier,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> EndpointBuffer:
    """
    Append one query parameter to an endpoint buffer in place.

    Args:
        buffer: Buffer holding a path and zero or more parameters
        name: Parameter name, written verbatim
        value: Raw parameter value, percent-encoded before writing
        max_length: Capacity available for the escaped value

    Returns:
        The same buffer, for chaining

    Raises:
        BufferTooSmallError: If the escaped value or the formatted
            parameter does not fit
        MalformedInputError: If value contains an embedded NUL

    Examples:
        >>> buf = EndpointBuffer(64, "/a/b/c")
        >>> append_endpoint_param(buf, "foo", "bar").getvalue()
        '/a/b/c?foo=bar'
    """
    escaped = escape_url_component(value, max_length)

    delimiter = "&" if buffer.has_query else "?"
    param = f"{delimiter}{name}={escaped}"

    if not buffer.fits(param):
        logger.debug(f"Parameter '{name}' does not fit ({buffer.remaining} bytes left)")
        raise BufferTooSmallError(
            len(buffer) + len(param) + 1, buffer.capacity, what=f"parameter '{name}'"
        )

    buffer.append(param)
    return buffer
