# ==============================================
# DocumentReader
# ==============================================
#
# PURPOSE:
#   Decode raw input into documents. Two shapes are accepted:
#
#   1. A single JSON array of objects:
#        [{"id": 1}, {"id": 2}]
#
#   2. One JSON object followed by zero or more concatenated objects,
#      optionally separated by whitespace (NDJSON is a special case):
#        {"id": 1}
#        {"id": 2}
#
#   Anything after a top-level array is ignored (with a warning).
#
# ERRORS:
# -------
#   - EmptyInput       → blank input, or the first value is not valid JSON
#   - InvalidDocument  → an element is not an object, holds a lone
#                        surrogate, or a later stream element is
#                        malformed
#
#   Values nested deeper than the decoder allows count as malformed.
#
#   Documents are yielded lazily, but EmptyInput is always raised before
#   the first document is produced.
#
# ==============================================

import json
import logging
import re
from typing import Any, Dict, Iterator, Union

from settings_guessr.errors import EmptyInput, InvalidDocument
from settings_guessr.normalization import TypeDetector

logger = logging.getLogger(__name__)

WHITESPACE = re.compile(r"[ \t\n\r]*")


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name}")


class DocumentReader:
    """Splits an input buffer into JSON object documents."""

    def __init__(self):
        self._decoder = json.JSONDecoder(parse_constant=_reject_constant)

    def iter_documents(self, data: Union[str, bytes]) -> Iterator[Dict[str, Any]]:
        """
        Yield every document of the input.

        Args:
            data: Raw input, bytes are decoded as UTF-8 (a BOM is allowed)

        Yields:
            Decoded JSON objects, in input order
        """
        text = self._decode(data)

        pos = self._skip_whitespace(text, 0)
        if pos == len(text):
            raise EmptyInput()

        try:
            first, pos = self._decoder.raw_decode(text, pos)
        except ValueError as e:
            raise EmptyInput(f"no JSON value could be parsed: {e}") from e
        except RecursionError as e:
            raise EmptyInput("no JSON value could be parsed: nested too deeply") from e

        if isinstance(first, list):
            for index, item in enumerate(first):
                yield self._as_document(item, index)

            if self._skip_whitespace(text, pos) != len(text):
                logger.warning("ignoring data after the top-level array at offset %d", pos)
            return

        yield self._as_document(first, 0)

        index = 1
        while True:
            pos = self._skip_whitespace(text, pos)
            if pos == len(text):
                return
            try:
                value, pos = self._decoder.raw_decode(text, pos)
            except ValueError as e:
                raise InvalidDocument(f"malformed JSON: {e}", index) from e
            except RecursionError as e:
                raise InvalidDocument("malformed JSON: nested too deeply", index) from e
            yield self._as_document(value, index)
            index += 1

    def read_all(self, data: Union[str, bytes]) -> list:
        """Decode every document eagerly."""
        return list(self.iter_documents(data))

    @staticmethod
    def _decode(data: Union[str, bytes]) -> str:
        if isinstance(data, str):
            return data
        try:
            return bytes(data).decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise EmptyInput(f"input is not valid UTF-8: {e}") from e

    @staticmethod
    def _skip_whitespace(text: str, pos: int) -> int:
        return WHITESPACE.match(text, pos).end()

    @staticmethod
    def _as_document(value: Any, index: int) -> Dict[str, Any]:
        if not isinstance(value, dict):
            raise InvalidDocument(f"expected a JSON object, got {TypeDetector.detect(value)}", index)
        _ensure_encodable(value, index)
        return value


def _ensure_encodable(document: Dict[str, Any], index: int) -> None:
    """
    Reject documents holding strings that cannot be written back as UTF-8.

    The decoder accepts escaped lone surrogates such as "\\ud800".
    """
    try:
        json.dumps(document, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidDocument(f"invalid unicode string: {e.reason}", index) from e
    except RecursionError as e:
        raise InvalidDocument("document is nested too deeply", index) from e
