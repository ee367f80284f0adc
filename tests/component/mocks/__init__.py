"""
Component Test Mocks

Shared mock implementations for component testing.
These mocks replace real I/O dependencies (HTTP, tracing).
"""

from .asgi_mock import post_then_disconnect, response_status
from .http_mock import MockHttpClient, MockHttpResponse
from .tracing_mock import MockTracing, RecordedSpan, TRACEPARENT

__all__ = [
    'MockHttpClient',
    'MockHttpResponse',
    'MockTracing',
    'RecordedSpan',
    'TRACEPARENT',
    'post_then_disconnect',
    'response_status',
]
