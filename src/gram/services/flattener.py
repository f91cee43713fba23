"""Flatten settings into comparable key/value pairs.

SETTINGS_FIELDS is the single table of diffable keys. Option keys
come from the Options field aliases, so the settings file format
and the flattened keys always agree.
"""

from collections.abc import Callable

from gram.models.settings import GramSettings, Options

Accessor = Callable[[GramSettings], object]


def _option(field_name: str) -> Accessor:
    def accessor(settings: GramSettings) -> object:
        if settings.options is None:
            return None
        return getattr(settings.options, field_name)

    return accessor


SETTINGS_FIELDS: list[tuple[str, Accessor]] = [
    ("description", lambda settings: settings.description),
    *(
        (f"options.{info.alias}", _option(name))
        for name, info in Options.model_fields.items()
    ),
    # An empty list is treated the same as no list.
    ("protected", lambda settings: settings.protected_branches or None),
]


def render(value: object) -> str:
    """Render a settings value the way it is shown in discrepancies."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return " ".join(str(item) for item in value)
    return str(value)


def flatten(settings: GramSettings) -> dict[str, str]:
    """
    Convert settings into a flat mapping of dotted keys to strings.

    Unset fields are left out, which is what makes the desired
    settings a partial specification. Protected branches collapse
    into a single space separated value under "protected".

    Args:
        settings: Settings to flatten.

    Returns:
        Mapping from key (e.g. "options.allow-squash-merge") to value.
    """
    flat: dict[str, str] = {}
    for key, accessor in SETTINGS_FIELDS:
        value = accessor(settings)
        if value is not None:
            flat[key] = render(value)
    return flat
