"""
Filter Compiler Module - Shorthand to CloudWatch filter pattern translation

Turns ``field=value`` / ``field:value`` shorthand into JSON filter patterns:

    routing_id=123          -> { $.routing_id = 123 }
    level:error user=42     -> { $.level = error && $.user = 42 }

Anything already written in the native syntax, and anything that is not
entirely shorthand (e.g. a bare ``ERROR`` term), is sent unchanged.
"""
from typing import Optional, Tuple

NATIVE_PREFIXES = ("{", "[")
FIELD_SELECTOR = "$"
AND_OPERATOR = " && "


def is_native_pattern(text: str) -> bool:
    """Check whether the text is already a native filter expression"""
    stripped = text.strip()
    return stripped.startswith(NATIVE_PREFIXES) or FIELD_SELECTOR in stripped


def parse_shorthand(token: str) -> Optional[Tuple[str, str]]:
    """
    Read one ``field=value`` or ``field:value`` token

    Returns:
        (field, value) or None if the token is not shorthand
    """
    for separator in ("=", ":"):
        if separator in token:
            field, value = token.split(separator, 1)
            field, value = field.strip(), value.strip()
            if field and value:
                return field, value
            return None
    return None


def compile_filter(raw: str) -> str:
    """
    Compile a user filter into the pattern sent to the store

    Args:
        raw: Filter text as typed

    Returns:
        Native filter pattern; empty string means no filter
    """
    if not raw.strip():
        return ""

    if is_native_pattern(raw):
        return raw

    clauses = []
    for token in raw.split():
        parsed = parse_shorthand(token)
        if parsed is None:
            # Never send a partially translated expression
            return raw
        field, value = parsed
        clauses.append(f"$.{field} = {value}")

    if not clauses:
        return raw

    return "{ " + AND_OPERATOR.join(clauses) + " }"
