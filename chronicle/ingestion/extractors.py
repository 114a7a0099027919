"""Default extractors that map log attributes onto audit calls.

Attributes are the key/value pairs of a structured log record, without
the logging library's own bookkeeping keys.
"""

from collections.abc import Callable, Collection, Mapping
from typing import Any

from chronicle.audit.models import Action, Value, hidden_value, plain_value
from chronicle.observability.logging import SENSITIVE_KEYS

# Attribute keys read by the default extractors
ATTR_ENTITY = "entity"
ATTR_ACTION = "action"
ATTR_AUTHOR = "author"
ATTR_USER = "user"

DEFAULT_AUTHOR = "system"

RESERVED_KEYS: frozenset[str] = frozenset({ATTR_ENTITY, ATTR_ACTION, ATTR_AUTHOR, ATTR_USER})

Attrs = Mapping[str, Any]
KeyExtractor = Callable[[Attrs], str | None]
ActionExtractor = Callable[[Attrs], Action]
AuthorExtractor = Callable[[Attrs], str]
PayloadExtractor = Callable[[Attrs], dict[str, Value]]


def attr_extractor(name: str) -> KeyExtractor:
    """Build a key extractor returning the string form of one attribute.

    The extractor returns None when the attribute is missing, which
    makes the record skip the audit trail.
    """

    def extract(attrs: Attrs) -> str | None:
        if name not in attrs:
            return None
        return str(attrs[name])

    return extract


def default_action_extractor(attrs: Attrs) -> Action:
    """Read the action attribute, falling back to create."""
    raw = attrs.get(ATTR_ACTION)
    if isinstance(raw, Action):
        return raw
    try:
        return Action(str(raw))
    except ValueError:
        return Action.CREATE


def default_author_extractor(attrs: Attrs, default: str = DEFAULT_AUTHOR) -> str:
    """Read the author or user attribute, falling back to default."""
    for name in (ATTR_AUTHOR, ATTR_USER):
        if name in attrs:
            return str(attrs[name])
    return default


def default_payload_extractor(
    attrs: Attrs,
    reserved: Collection[str] = RESERVED_KEYS,
    hidden: Collection[str] = SENSITIVE_KEYS,
) -> dict[str, Value]:
    """Copy every non-reserved attribute into the payload.

    Attributes whose lowercased name is in hidden are recorded as hidden
    values, matching the keys the log redactor masks.
    """
    return {
        name: hidden_value() if name.lower() in hidden else plain_value(value)
        for name, value in attrs.items()
        if name not in reserved
    }
