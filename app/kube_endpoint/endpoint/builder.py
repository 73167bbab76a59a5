"""
Endpoint URI assembly for the pod attach/exec subresource.

The builder escapes every identifier, formats the path, appends the
optional command and container parameters and finishes with the fixed
stdin/stdout/tty flags:

    /api/v1/namespaces/{ns}/pods/{pod}/{attach|exec}?...stdin=true&stdout=true&tty=true

Note that no separator is written between the last dynamic parameter and
the fixed flags unless separate_fixed_flags is enabled, so an exec with a
container ends in "...&container=mainstdin=true&stdout=true&tty=true".
"""

from typing import Optional

from kube_endpoint.config.models import (
    ApiServerSettings,
    DEFAULT_MAX_LENGTH,
    ConnectionSettings,
    EndpointSettings,
)
from kube_endpoint.endpoint.escaper import RawIdentifier, escape_url_component
from kube_endpoint.endpoint.params import append_endpoint_param
from kube_endpoint.endpoint.types import (
    BufferTooSmallError,
    EndpointBuffer,
    EndpointError,
    EndpointVerb,
)
from kube_endpoint.utils import get_logger

logger = get_logger(__name__)

API_PATH_TEMPLATE = "/api/v1/namespaces/{namespace}/pods/{pod}/{verb}"
FIXED_FLAGS = "stdin=true&stdout=true&tty=true"


class EndpointBuilder:
    """
    Builds endpoint URIs within the configured length limit.

    The builder holds no per-call state and may be shared between threads.
    """

    def __init__(self, settings: Optional[EndpointSettings] = None):
        """
        Initialize the builder.

        Args:
            settings: Endpoint settings; defaults are used if omitted
        """
        self.settings = settings or EndpointSettings()

    @property
    def max_length(self) -> int:
        return self.settings.max_length

    def build(
        self,
        namespace: RawIdentifier,
        pod: RawIdentifier,
        container: Optional[RawIdentifier] = None,
        command: Optional[RawIdentifier] = None,
        capacity: Optional[int] = None,
    ) -> str:
        """
        Build the endpoint URI for attaching to or executing in a container.

        Args:
            namespace: Namespace of the pod
            pod: Name of the pod
            container: Optional container name
            command: Optional command; selects the exec verb when given
            capacity: Destination capacity including the terminator;
                defaults to the configured maximum length

        Returns:
            The endpoint URI

        Raises:
            BufferTooSmallError: If any component, the path, the parameters
                or the final URI does not fit
            MalformedInputError: If an identifier contains an embedded NUL
        """
        capacity = self.max_length if capacity is None else capacity

        try:
            escaped_namespace = escape_url_component(namespace, self.max_length)
            escaped_pod = escape_url_component(pod, self.max_length)

            verb = EndpointVerb.for_command(command)

            path = EndpointBuffer(self.max_length, name="endpoint path")
            path.append(
                API_PATH_TEMPLATE.format(
                    namespace=escaped_namespace, pod=escaped_pod, verb=verb.value
                )
            )

            params = EndpointBuffer(self.max_length, name="endpoint params")
            if command is not None:
                append_endpoint_param(params, "command", command, self.max_length)
            if container is not None:
                append_endpoint_param(params, "container", container, self.max_length)

            text = path.getvalue() + self._query(params)
            if capacity < 1:
                raise BufferTooSmallError(len(text) + 1, capacity, what="endpoint uri")
            uri = EndpointBuffer(capacity, name="endpoint uri")
            uri.append(text)
        except EndpointError as e:
            logger.debug(f"Endpoint construction failed: {e}")
            raise

        logger.debug(f"Built {verb.value} endpoint ({len(uri)} bytes)")
        return uri.getvalue()

    def _query(self, params: EndpointBuffer) -> str:
        """Join the dynamic parameters with the fixed flags."""
        if not len(params):
            return "?" + FIXED_FLAGS
        if self.settings.separate_fixed_flags:
            return params.getvalue() + "&" + FIXED_FLAGS
        return params.getvalue() + FIXED_FLAGS

    def build_for(
        self, connection: ConnectionSettings, capacity: Optional[int] = None
    ) -> str:
        """
        Build the endpoint URI for a configured connection.

        Raises:
            ValueError: If the connection has no pod or an empty namespace
            BufferTooSmallError: If the URI does not fit
        """
        if not connection.namespace:
            raise ValueError("connection.namespace must not be empty")
        if not connection.pod:
            raise ValueError("connection.pod is required to build an endpoint")
        return self.build(
            connection.namespace,
            connection.pod,
            container=connection.container,
            command=connection.exec_command,
            capacity=capacity,
        )


def create_builder(settings: Optional[EndpointSettings] = None) -> EndpointBuilder:
    """
    Factory function to create an EndpointBuilder.

    Args:
        settings: Endpoint settings

    Returns:
        Configured EndpointBuilder instance
    """
    return EndpointBuilder(settings)


def build_endpoint_uri(
    namespace: RawIdentifier,
    pod: RawIdentifier,
    container: Optional[RawIdentifier] = None,
    command: Optional[RawIdentifier] = None,
    capacity: Optional[int] = None,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> str:
    """
    Build an endpoint URI with default settings.

    Examples:
        >>> build_endpoint_uri("ns1", "pod1")
        '/api/v1/namespaces/ns1/pods/pod1/attach?stdin=true&stdout=true&tty=true'
    """
    builder = EndpointBuilder(EndpointSettings(max_length=max_length))
    return builder.build(namespace, pod, container, command, capacity=capacity)


def build_websocket_url(api_server: ApiServerSettings, endpoint: str) -> str:
    """
    Prefix an endpoint URI with the API server's WebSocket scheme and address.

    Only formats the URL; the connection itself is opened elsewhere.
    """
    scheme = "wss" if api_server.use_ssl else "ws"
    return f"{scheme}://{api_server.hostname}:{api_server.port}{endpoint}"
