"""
Selective-property canonical hashing
Only the properties named by a hashed property list take part in a digest
"""

from typing import Any, Iterable, Iterator, List, Sequence, Union

from .crypto import hash

JsonValue = Union[str, int, bool, None, list, dict]

WILDCARD = "*"


def escape_string(s: str) -> str:
    """Escape a string for canonical JSON."""
    result = ['"']
    for c in s:
        code = ord(c)
        if c == '"':
            result.append('\\"')
        elif c == '\\':
            result.append('\\\\')
        elif c == '\b':
            result.append('\\b')
        elif c == '\f':
            result.append('\\f')
        elif c == '\n':
            result.append('\\n')
        elif c == '\r':
            result.append('\\r')
        elif c == '\t':
            result.append('\\t')
        elif code < 0x20:
            result.append(f'\\u{code:04x}')
        else:
            result.append(c)
    result.append('"')
    return ''.join(result)


def canonicalize(value: JsonValue) -> str:
    """
    Canonicalize a JSON-serializable value to deterministic string.

    Rules:
    - Keys sorted lexicographically
    - No whitespace
    - Integers only (no floats)
    - Proper string escaping
    """
    if value is None:
        return 'null'

    if isinstance(value, bool):
        return 'true' if value else 'false'

    if isinstance(value, int):
        return str(value)

    if isinstance(value, float):
        raise ValueError("Floats forbidden in canonical JSON")

    if isinstance(value, str):
        return escape_string(value)

    if isinstance(value, list):
        elements = [canonicalize(v) for v in value]
        return '[' + ','.join(elements) + ']'

    if isinstance(value, dict):
        keys = sorted(value.keys())
        pairs = [escape_string(k) + ':' + canonicalize(value[k]) for k in keys]
        return '{' + ','.join(pairs) + '}'

    raise ValueError(f"Unsupported type in canonical JSON: {type(value)}")


def _resolve(node: Any, segments: Sequence[str]) -> Iterator[Any]:
    if node is None:
        return
    if not segments:
        yield node
        return

    head, rest = segments[0], segments[1:]

    if head == WILDCARD:
        if isinstance(node, list):
            for element in node:
                yield from _resolve(element, rest)
        return

    if isinstance(node, dict):
        if head in node:
            yield from _resolve(node[head], rest)
    elif isinstance(node, list) and head.isdigit():
        index = int(head)
        if index < len(node):
            yield from _resolve(node[index], rest)


def resolve_path(record: JsonValue, path: str) -> List[Any]:
    """
    Resolve a dot separated property path against a record.

    A `*` segment fans out over every element of the array at that position,
    in array order. Missing properties resolve to nothing.
    """
    return list(_resolve(record, path.split(".")))


def select_values(record: JsonValue, paths: Iterable[str]) -> List[Any]:
    """Collect the values of all paths, in path order."""
    values = []
    for path in paths:
        values.extend(resolve_path(record, path))
    return values


def encode_value(value: Any) -> str:
    """Encode a single hashed value to its canonical string form."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    return canonicalize(value)


def hash_values(*values: Any) -> str:
    """Hash the concatenated canonical forms of values, skipping None."""
    encoded = ''.join(encode_value(v) for v in values if v is not None)
    return hash(encoded.encode('utf-8'))


def hash_object(record: JsonValue, paths: Iterable[str]) -> str:
    """
    Compute the canonical digest of a record restricted to `paths`.

    Properties not named by `paths` never affect the result, so fields can be
    added to a record after it has been sealed.
    """
    return hash_values(*select_values(record, paths))
