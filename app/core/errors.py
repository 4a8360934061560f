from __future__ import annotations

import json
from collections.abc import Mapping

from kubernetes.client.exceptions import ApiException


class KubernetesNotConfiguredError(RuntimeError):
    """Raised when neither in-cluster nor kubeconfig credentials could be loaded."""

    def __init__(self) -> None:
        super().__init__("kubernetes client is not configured")


class ResourceQueryError(Exception):
    """An upstream failure already reduced to a single user-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def format_error(exc: BaseException) -> str:
    """Reduce any upstream failure to one renderable string.

    Structured API errors from the apiserver win, then the HTTP status line of
    an API error without a readable body, then whatever message the exception
    carries, then its repr.
    """
    if isinstance(exc, ApiException):
        message = _api_body_message(exc.body)
        if message:
            return message
        if exc.reason:
            return f"{exc.status} {exc.reason}" if exc.status else str(exc.reason)

    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message

    text = str(exc)
    if text:
        return text
    return repr(exc)


def _api_body_message(body: object) -> str | None:
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8", errors="replace")
    if isinstance(body, str):
        try:
            body = json.loads(body)
        except ValueError:
            return None
    if not isinstance(body, Mapping):
        return None
    message = body.get("message")
    if isinstance(message, str) and message:
        return message
    return None
