"""OpenTelemetry spans around registry operations.

Spans are named ``journeykit.<kind>.<operation>``. Only the OpenTelemetry API
is used; until an application installs an SDK the spans are no-ops.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from opentelemetry import trace
from opentelemetry.trace import Span

TRACER_NAME = "journeykit"

_ATTRIBUTE_TYPES = (bool, str, int, float)


def span_name(kind: str, operation: str) -> str:
    return f"{TRACER_NAME}.{kind}.{operation}"


@contextmanager
def registry_span(kind: str, operation: str, **attributes: object) -> Iterator[Span]:
    """
    Current span for ``operation`` on the ``kind`` registry.

    Keyword attributes are recorded as ``journeykit.<name>``; values OpenTelemetry
    cannot store (``None``, containers) are skipped. An exception escaping the
    block is recorded on the span and marks it as failed before propagating.
    """
    tracer = trace.get_tracer(TRACER_NAME)
    with tracer.start_as_current_span(span_name(kind, operation)) as span:
        span.set_attribute("journeykit.kind", kind)
        for name, value in attributes.items():
            if isinstance(value, _ATTRIBUTE_TYPES):
                span.set_attribute(f"journeykit.{name}", value)
        yield span


__all__ = ["TRACER_NAME", "registry_span", "span_name"]
