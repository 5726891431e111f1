"""Input normalization for deterministic shape matching."""

from __future__ import annotations

_DASHES = str.maketrans({"−": "-", "–": "-", "—": "-"})


def normalize_text(text: str | None) -> str:
    """Trim the input and map unicode dashes / minus sign to ASCII `-`.

    Case is preserved; shapes that care about case match case-insensitively themselves.
    """

    value = (text or "").strip()
    return value.translate(_DASHES)
