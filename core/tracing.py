"""
Tracing

OpenTelemetry-backed tracing capability injected into the services.
Provider and exporter setup is left to the deployment (e.g. opentelemetry-instrument);
without one the API tracer is a no-op.
"""

from contextlib import contextmanager
from typing import Any, ContextManager, Dict, Iterator, Mapping, Optional, Protocol, runtime_checkable

from opentelemetry import propagate, trace


@runtime_checkable
class TracingProtocol(Protocol):
    """
    Interface for the tracing capability handed to each component.

    Implementations:
    - OtelTracing (production)
    - MockTracing (testing)
    """

    def span(
        self,
        name: str,
        carrier: Optional[Mapping[str, str]] = None,
        **attributes: Any
    ) -> ContextManager[Any]:
        """Open a span for the duration of a with-block; it is ended exactly once on exit"""
        ...

    def inject(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Add the current trace context to outbound request headers"""
        ...


class OtelTracing:
    """
    Tracing capability over the OpenTelemetry API.

    Usage:
        tracing = OtelTracing("weather_service")

        with tracing.span("lookup_city", cep=cep):
            headers = tracing.inject({})
    """

    def __init__(self, service_name: str, tracer_provider: Optional[trace.TracerProvider] = None):
        self.service_name = service_name
        self._tracer = trace.get_tracer(service_name, tracer_provider=tracer_provider)

    @contextmanager
    def span(
        self,
        name: str,
        carrier: Optional[Mapping[str, str]] = None,
        **attributes: Any
    ) -> Iterator[trace.Span]:
        """
        Start a span as the current span and end it when the block exits.

        Args:
            name: Span name
            carrier: Inbound headers to continue a remote trace from
            **attributes: Span attributes
        """
        context = propagate.extract(carrier) if carrier is not None else None
        with self._tracer.start_as_current_span(
            name,
            context=context,
            attributes=attributes or None,
        ) as span:
            yield span

    def inject(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Write the current trace context into outbound headers"""
        propagate.inject(headers)
        return headers


__all__ = ["TracingProtocol", "OtelTracing"]
