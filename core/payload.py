"""Upstream body decoding with a raw-text fallback."""

import json
from dataclasses import dataclass
from typing import Any

RAW_KEY = "raw"

# Raised by loads_strict for anything that is not standard JSON
JSON_ERRORS = (ValueError, RecursionError)


@dataclass(frozen=True)
class ParsedJson:
    value: Any

    def as_json(self) -> Any:
        return self.value


@dataclass(frozen=True)
class RawText:
    """Body that is not JSON (HTML error pages, empty bodies, plain text)."""

    text: str

    def as_json(self) -> dict[str, str]:
        return {RAW_KEY: self.text}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def loads_strict(text: str | bytes) -> Any:
    """Parse standard JSON only; NaN and Infinity cannot be re-serialized."""
    return json.loads(text, parse_constant=_reject_constant)


def decode_payload(text: str) -> ParsedJson | RawText:
    """Decode an upstream body; never raises."""
    try:
        return ParsedJson(loads_strict(text))
    except JSON_ERRORS:
        return RawText(text)


def encode_body(body: Any) -> bytes:
    """Serialize an outbound body as compact JSON."""
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
