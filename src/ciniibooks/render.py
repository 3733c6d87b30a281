"""Display formatting for names and texts that carry a reading."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .record.schemas import TextField


def split_reading(fields: Sequence["TextField"]) -> tuple[str, str]:
    """Split a 1-2 entry text list into ``(canonical, reading)``.

    The canonical form is the entry without ``xml:lang`` and the reading is
    the lang-tagged one, whatever order they appear in. When every entry is
    tagged (or none is), position decides.
    """
    if not fields:
        return "", ""

    plain = [f for f in fields if not f.lang]
    tagged = [f for f in fields if f.lang]

    if plain and tagged:
        return plain[0].text, tagged[0].text
    reading = fields[1].text if len(fields) > 1 else ""
    return fields[0].text, reading


def format_text(text: str, reading: str = "") -> str:
    """Render ``Text (Reading)``, dropping the reading when empty."""
    if reading:
        return f"{text} ({reading})"
    return text


def format_name(name: str, reading: str = "", identifier: str = "") -> str:
    """Render ``Name (Reading) [ID]``, omitting empty parts."""
    parts = []
    if name:
        parts.append(format_text(name, reading))
    elif reading:
        parts.append(f"({reading})")
    if identifier:
        parts.append(f"[{identifier}]")
    return " ".join(parts)


def format_text_fields(fields: Sequence["TextField"]) -> str:
    """Render a text list such as a title as ``Text (Reading)``."""
    return format_text(*split_reading(fields))
