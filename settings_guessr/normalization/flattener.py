# ==============================================
# Flattener
# ==============================================
#
# PURPOSE:
#   Turn one nested document into a flat mapping of
#   dot-notation field path → leaf JSON value.
#
# RULES:
# ------
#   {"a": {"b": 1}}                  → {"a.b": 1}
#   {"tags": ["x", "y"]}             → {"tags": ["x", "y"]}
#   {"items": [{"n": 1}, {"n": 2}]}  → {"items.0.n": 1, "items.1.n": 2}
#   {"mix": [1, {"n": 2}]}           → {"mix": [1], "mix.1.n": 2}
#
#   Arrays without objects stay intact on their parent path.
#   Arrays holding objects are walked with the element
#   index as a path segment; their other elements stay on the
#   parent path. Empty objects produce no field.
#
# ==============================================

from typing import Any, Dict, List, Tuple


class Flattener:
    """Flattens nested documents into dot-notation keys."""

    def __init__(self, separator: str = "."):
        self.separator = separator

    def flatten(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten a document.

        Args:
            document: A decoded JSON object

        Returns:
            A dictionary with flattened keys, in document order
        """
        flattened: Dict[str, Any] = {}

        # Walked with an explicit stack of (path, value, is_leaf) entries,
        # popped in document order
        stack: List[Tuple[str, Any, bool]] = [("", document, False)]
        while stack:
            path, value, is_leaf = stack.pop()
            if is_leaf:
                flattened[path] = value
            elif isinstance(value, dict):
                stack.extend(reversed(self._object_children(value, path)))
            elif isinstance(value, list) and any(isinstance(item, dict) for item in value):
                stack.extend(reversed(self._array_children(value, path)))
            else:
                flattened[path] = value

        return flattened

    def _object_children(self, obj: Dict[str, Any], prefix: str) -> List[Tuple[str, Any, bool]]:
        return [(self._flatten_key(prefix, str(key)), value, False) for key, value in obj.items()]

    def _array_children(self, array: List[Any], path: str) -> List[Tuple[str, Any, bool]]:
        children = []
        remaining = []
        for index, item in enumerate(array):
            if isinstance(item, dict):
                children.append((self._flatten_key(path, str(index)), item, False))
            else:
                remaining.append(item)

        # Non-object elements land on the parent path after the objects
        if remaining:
            children.append((path, remaining, True))
        return children

    def _flatten_key(self, prefix: str, key: str) -> str:
        """
        Combine a prefix with a key using the separator.

        Examples:
            _flatten_key("", "username") → "username"
            _flatten_key("metadata", "version") → "metadata.version"
        """
        if not prefix:
            return key
        return f"{prefix}{self.separator}{key}"
