"""
Endpoint construction for the pod attach/exec subresource.

This module handles:
- Percent-encoding of untrusted identifiers
- Query parameter appending with '?'/'&' delimiter selection
- Assembly of the full endpoint URI
"""

from kube_endpoint.endpoint.types import (
    BufferTooSmallError,
    EndpointBuffer,
    EndpointError,
    EndpointVerb,
    MalformedInputError,
)
from kube_endpoint.endpoint.escaper import (
    UNRESERVED_MARKS,
    escape_url_component,
)
from kube_endpoint.endpoint.params import append_endpoint_param
from kube_endpoint.endpoint.builder import (
    FIXED_FLAGS,
    EndpointBuilder,
    build_endpoint_uri,
    build_websocket_url,
    create_builder,
)

__all__ = [
    # Types
    "EndpointBuffer",
    "EndpointVerb",
    # Exceptions
    "EndpointError",
    "BufferTooSmallError",
    "MalformedInputError",
    # Escaper
    "UNRESERVED_MARKS",
    "escape_url_component",
    # Parameters
    "append_endpoint_param",
    # Builder
    "FIXED_FLAGS",
    "EndpointBuilder",
    "build_endpoint_uri",
    "build_websocket_url",
    "create_builder",
]
