import re
from collections.abc import Mapping
from typing import Any

PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


def apply_patterns(template: str, data: Mapping[str, Any]) -> str:
    """Substitute ``{name}`` placeholders in ``template`` with values from ``data``.

    "Hello, {first} {last}" with {"first": "Alice", "last": "Smith"} becomes
    "Hello, Alice Smith". Placeholders whose key is missing (or maps to None)
    are left in the output as-is.
    """

    def _replace(match: re.Match[str]) -> str:
        value = data.get(match.group(1))
        if value is None:
            return match.group(0)
        return str(value)

    return PLACEHOLDER_RE.sub(_replace, template)


def parse_patterns(template: str, value: str) -> dict[str, str] | None:
    """Recover placeholder values from a string built with ``apply_patterns``.

    Returns None when ``value`` does not match ``template``. A placeholder
    that appears twice must match the same text both times.
    """
    regex = ""
    seen: set[str] = set()
    position = 0
    for match in PLACEHOLDER_RE.finditer(template):
        regex += re.escape(template[position : match.start()])
        name = match.group(1)
        if name in seen:
            regex += f"(?P={name})"
        else:
            regex += f"(?P<{name}>[^/?&]+?)"
            seen.add(name)
        position = match.end()
    regex += re.escape(template[position:])

    matched = re.fullmatch(regex, value)
    if matched is None:
        return None
    return matched.groupdict()


__all__ = ["apply_patterns", "parse_patterns"]
