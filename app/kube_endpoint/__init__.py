"""
Kubernetes exec/attach endpoint builder.

Builds the percent-encoded API server path and query string used to attach
to, or execute a command in, a container of a Kubernetes pod.
"""

__version__ = "0.1.0"
