"""
Pattern catalog lookup: by name, short alias, or flag number.
"""
from .data.flags import ALIASES, FLAGS
from .render.schema import Pattern

_BY_NAME: dict[str, Pattern] = {p.name: p for p in FLAGS}


class UnknownPatternError(ValueError):
    """Requested flag is not in the catalog."""
    def __init__(self, identifier: str | int):
        super().__init__(f"Invalid flag: {identifier}")
        self.identifier = identifier


def list_patterns() -> list[tuple[int, str]]:
    """(flag number, name) for every pattern, in catalog order."""
    return [(i, p.name) for i, p in enumerate(FLAGS)]


def get_pattern(identifier: str | int) -> Pattern:
    """Resolve a flag name, alias, or number (int or digit string)."""
    if isinstance(identifier, bool):
        raise UnknownPatternError(identifier)
    if isinstance(identifier, int):
        if 0 <= identifier < len(FLAGS):
            return FLAGS[identifier]
        raise UnknownPatternError(identifier)
    key = str(identifier).strip().lower()
    if key.isascii() and key.isdigit():
        number = int(key)
        if number < len(FLAGS):
            return FLAGS[number]
        raise UnknownPatternError(identifier)
    key = ALIASES.get(key, key)
    try:
        return _BY_NAME[key]
    except KeyError:
        raise UnknownPatternError(identifier) from None
