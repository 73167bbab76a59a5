#!/usr/bin/env python3
"""
Kubernetes Endpoint Builder - Entry Point

Prints the attach/exec endpoint URI for a pod, or the full WebSocket URL
when --websocket is given.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

# Add app directory to path for imports when running directly
APP_DIR = Path(__file__).parent
if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))

from pydantic import ValidationError

from kube_endpoint import __version__
from kube_endpoint.config import KubeEndpointConfig, load_config
from kube_endpoint.endpoint import EndpointError, build_websocket_url, create_builder
from kube_endpoint.utils import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Build the Kubernetes API endpoint for attaching to a pod",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Attach to the main process of a pod
  python main.py --pod web-0

  # Run a shell in a specific container
  python main.py --namespace prod --pod web-0 --container app --command /bin/sh

  # Full WebSocket URL for a TLS-enabled API server
  python main.py --pod web-0 --hostname k8s.local --port 6443 --use-ssl --websocket
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"kube-endpoint {__version__}",
    )
    parser.add_argument(
        "--config-dir",
        type=str,
        help="Configuration directory path (default: ~/.kube-endpoint/)",
    )
    parser.add_argument("--namespace", "-n", type=str, help="Pod namespace (overrides config)")
    parser.add_argument("--pod", "-p", type=str, help="Pod name (overrides config)")
    parser.add_argument("--container", "-c", type=str, help="Container name (overrides config)")
    parser.add_argument(
        "--command",
        type=str,
        help="Command to execute instead of attaching (overrides config)",
    )
    parser.add_argument("--hostname", type=str, help="API server hostname (overrides config)")
    parser.add_argument("--port", type=int, help="API server port (overrides config)")
    parser.add_argument(
        "--use-ssl",
        action="store_true",
        default=None,
        help="Use wss:// for the WebSocket URL (overrides config)",
    )
    parser.add_argument(
        "--websocket",
        action="store_true",
        help="Print the full WebSocket URL instead of the endpoint path",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="Logging level (overrides config)",
    )
    return parser.parse_args(argv)


def apply_overrides(config: KubeEndpointConfig, args: argparse.Namespace) -> KubeEndpointConfig:
    """
    Apply CLI overrides on top of the loaded configuration.

    Connection identifiers are copied in without validation: argv may hold
    undecodable bytes as surrogates, which pydantic rejects but the escaper
    turns back into %XX. The builder checks them instead.
    """
    data = config.model_dump(exclude={"connection"})
    overrides = {
        ("api_server", "hostname"): args.hostname,
        ("api_server", "port"): args.port,
        ("api_server", "use_ssl"): args.use_ssl,
        ("logging", "level"): args.log_level,
    }
    for (section, key), value in overrides.items():
        if value is not None:
            data[section][key] = value
    validated = KubeEndpointConfig.model_validate(data)

    identifiers = {
        "namespace": args.namespace,
        "pod": args.pod,
        "container": args.container,
        "exec_command": args.command,
    }
    validated.connection = config.connection.model_copy(
        update={k: v for k, v in identifiers.items() if v is not None}
    )
    return validated


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config_dir), args)
    except ValidationError as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging.level, config.logging.file)
    logger.debug(f"Endpoint settings: {config.endpoint.model_dump()}")

    builder = create_builder(config.endpoint)
    try:
        endpoint = builder.build_for(config.connection)
    except (EndpointError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.websocket:
        print(build_websocket_url(config.api_server, endpoint))
    else:
        print(endpoint)
    return 0


if __name__ == "__main__":
    sys.exit(main())
