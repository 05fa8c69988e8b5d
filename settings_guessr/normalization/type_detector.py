import json
from typing import Any


class TypeDetector:
    """Tells the JSON kind of a decoded value."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @classmethod
    def detect(cls, value: Any) -> str:
        if value is None:
            return cls.NULL

        # bool is a subclass of int, check it first
        if isinstance(value, bool):
            return cls.BOOL

        if isinstance(value, (int, float)):
            return cls.NUMBER

        if isinstance(value, str):
            return cls.STRING

        if isinstance(value, (list, tuple)):
            return cls.ARRAY

        if isinstance(value, dict):
            return cls.OBJECT

        raise TypeError(f"not a JSON value: {type(value).__name__}")

    @classmethod
    def is_number(cls, value: Any) -> bool:
        return cls.detect(value) == cls.NUMBER

    @classmethod
    def is_scalar(cls, value: Any) -> bool:
        return cls.detect(value) in (cls.NULL, cls.BOOL, cls.NUMBER, cls.STRING)

    @classmethod
    def canonical_key(cls, value: Any) -> str:
        """
        Canonical JSON text of a value, used as its identity.

        Keeps 1, 1.0 and true apart, which plain Python equality does not.
        """
        return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
