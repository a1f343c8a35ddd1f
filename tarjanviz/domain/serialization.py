import json
from enum import Enum
from typing import Any


class StrictTraceEncoder(json.JSONEncoder):
    """
    JSON Encoder that prioritizes Determinism over Flexibility.

    RULES:
    1. Enums MUST use their .value.
    2. Sets -> Lists (sorted for determinism).
    3. Objects exposing to_dict() are encoded through it.
    4. Other dataclasses fall back to asdict().
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, (set, frozenset)):
            return sorted(list(obj))
        if hasattr(obj, "to_dict"):
            return obj.to_dict()
        if hasattr(obj, "__dataclass_fields__"):
            from dataclasses import asdict
            return asdict(obj)

        return super().default(obj)


def canonical_json(obj: Any) -> str:
    """Compact, key-sorted encoding used for hashing."""
    return json.dumps(obj, cls=StrictTraceEncoder, sort_keys=True, separators=(",", ":"))
