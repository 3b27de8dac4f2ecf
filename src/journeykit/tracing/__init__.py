# journeykit/tracing/__init__.py
from .tracing import TRACER_NAME, registry_span, span_name

__all__ = [
    "TRACER_NAME",
    "registry_span",
    "span_name",
]
