from .serialization import StrictTraceEncoder, canonical_json

__all__ = ['StrictTraceEncoder', 'canonical_json']
