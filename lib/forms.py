# =============================================================================
# lib/forms.py - URL-encoded Form Decoding
# =============================================================================
# Decodes `key=value&key2=value2` payloads (request bodies and query strings)
# into plain Python mappings.
#
# Two modes:
# - flat:     repeated keys collect into a list, brackets are not special
# - extended: bracket notation builds nested values
#               a[b]=1         -> {"a": {"b": "1"}}
#               a[]=1&a[]=2    -> {"a": ["1", "2"]}
#               a[1]=y&a[0]=x  -> {"a": ["x", "y"]}
#
# Usage:
#   from lib.forms import parse_form, render_value
#   fields = parse_form(b"mensaje=hola+mundo")
#   render_value(fields.get("mensaje"))  # "hola mundo"
# =============================================================================

import re
from typing import Any
from urllib.parse import parse_qsl

from app.exceptions import FormDecodeError

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Rendering for a value that was not sent at all
UNDEFINED = "undefined"

_CHILD_SEGMENT = re.compile(r"\[([^\[\]]*)\]")


# =============================================================================
# Key Splitting
# =============================================================================

def split_key(key: str, depth: int = 5) -> list[str]:
    """
    Split a bracketed key into its path segments.

    "a[b][c]" -> ["a", "b", "c"], "a[]" -> ["a", ""].
    Segments past `depth` stay together as one literal segment, so
    "a[b][c][d]" with depth=2 -> ["a", "b", "c", "[d]"].
    Keys without a name before the first bracket, or without any
    well-formed bracket, are returned whole.
    """
    bracket = key.find("[")
    if bracket <= 0:
        return [key]

    segments = [key[:bracket]]
    pos = bracket
    while len(segments) <= depth:
        match = _CHILD_SEGMENT.match(key, pos)
        if match is None:
            break
        segments.append(match.group(1))
        pos = match.end()

    if len(segments) == 1:
        return [key]
    if pos < len(key):
        segments.append(key[pos:])
    return segments


# =============================================================================
# Assembly
# =============================================================================

def _next_index(container: dict[str, Any]) -> str:
    return str(len(container))


def _merge_leaf(container: dict[str, Any], key: str, value: str) -> None:
    existing = container.get(key)
    if existing is None:
        container[key] = value
    elif isinstance(existing, list):
        existing.append(value)
    elif isinstance(existing, dict):
        existing[_next_index(existing)] = value
    else:
        container[key] = [existing, value]


def _assign(container: dict[str, Any], key: str, segments: list[str], value: str) -> None:
    if not segments:
        _merge_leaf(container, key, value)
        return

    child = container.get(key)
    if isinstance(child, list):
        child = {str(i): item for i, item in enumerate(child)}
        container[key] = child
    elif not isinstance(child, dict):
        # A scalar already sitting here becomes the first indexed entry
        child = {} if child is None else {"0": child}
        container[key] = child

    head = segments[0] or _next_index(child)
    _assign(child, head, segments[1:], value)


def _compact(value: Any) -> Any:
    """Turn index-keyed mappings into lists, recursively."""
    if isinstance(value, list):
        return [_compact(item) for item in value]
    if not isinstance(value, dict):
        return value

    compacted = {key: _compact(item) for key, item in value.items()}
    if compacted and all(key.isdigit() for key in compacted):
        return [compacted[key] for key in sorted(compacted, key=int)]
    return compacted


# =============================================================================
# Public API
# =============================================================================

def parse_form(
    data: bytes | str,
    *,
    extended: bool = True,
    depth: int = 5,
    parameter_limit: int = 1000,
    encoding: str = "utf-8",
    truncate: bool = False,
) -> dict[str, Any]:
    """
    Decode a urlencoded payload into a mapping.

    Args:
        data: Raw body bytes or an already-decoded query string
        extended: Build nested values from bracket notation
        depth: Maximum bracket nesting depth (extended mode only)
        parameter_limit: Maximum number of fields accepted
        encoding: Charset used for the raw bytes and for %XX escapes
        truncate: Keep the first `parameter_limit` fields instead of failing

    Returns:
        Mapping of field names to str, list, or nested mapping values.
        An empty payload gives an empty mapping.

    Raises:
        FormDecodeError: If the bytes are not valid in `encoding`, the
            charset is unknown, or there are too many fields (unless
            `truncate` is set)
    """
    try:
        text = data.decode(encoding) if isinstance(data, bytes) else data
        if truncate:
            text = "&".join(text.split("&")[:parameter_limit])
        pairs = parse_qsl(
            text,
            keep_blank_values=True,
            encoding=encoding,
            errors="strict",
            max_num_fields=parameter_limit,
        )
    except (UnicodeDecodeError, LookupError, ValueError) as e:
        raise FormDecodeError(str(e)) from e

    fields: dict[str, Any] = {}
    for key, value in pairs:
        if extended:
            head, *rest = split_key(key, depth)
            _assign(fields, head, rest, value)
        else:
            _merge_leaf(fields, key, value)

    if not extended:
        return fields
    return {key: _compact(value) for key, value in fields.items()}


def render_value(value: Any) -> str:
    """
    Render a decoded field for interpolation into a text response.

    None (field not sent) -> "undefined"; lists are comma-joined;
    nested mappings render as key=value pairs joined by "&".
    """
    if value is None:
        return UNDEFINED
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return ",".join(render_value(item) for item in value)
    if isinstance(value, dict):
        return "&".join(f"{key}={render_value(item)}" for key, item in value.items())
    return str(value)
