from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, NoReturn, Union

from .errors import ParseError


def _int_from_literal(literal: str) -> int:
    # Decimal has no digit limit, unlike int(str) on 3.11+
    return int(Decimal(literal))


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not valid JSON")


def parse_json(text: Union[str, bytes, bytearray]) -> Any:
    """Parse a JSON document into plain Python values.

    Integer literals become exact ``int`` values regardless of size;
    literals with a fraction or exponent stay ``float``. ``NaN`` and
    ``Infinity`` are rejected. Raises ParseError on malformed input,
    including nesting deeper than the interpreter's recursion limit.
    """

    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"JSON payload is not valid UTF-8: {e}", context={"position": e.start}) from e

    try:
        return json.loads(text, parse_int=_int_from_literal, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"Invalid JSON: {e.msg} (line {e.lineno} column {e.colno})",
            context={"line": e.lineno, "column": e.colno, "position": e.pos},
        ) from e
    except RecursionError as e:
        raise ParseError("Invalid JSON: document is nested too deeply", context={"reason": "depth"}) from e
    except ValueError as e:
        raise ParseError(f"Invalid JSON: {e}", context={"reason": "constant"}) from e


def dumps_json(value: Any) -> str:
    """Serialize a value tree compactly; integers keep all their digits."""

    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
