from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional


class Patch:
    """Partial update payload that tracks which fields were supplied.

    Presence is what matters: a field passed as ``None`` or ``False`` is kept,
    a field that was never passed is left out of the mutation input. With
    ``skip_empty`` the blank values ``None``, ``""``, ``[]`` and ``{}`` count as
    not passed.
    """

    def __init__(self) -> None:
        self._fields: Dict[str, Any] = {}

    @classmethod
    def from_arguments(
        cls,
        arguments: Mapping[str, Any],
        fields: Iterable[str],
        rename: Optional[Mapping[str, str]] = None,
        skip_empty: bool = False,
    ) -> "Patch":
        rename = rename or {}
        patch = cls()
        for name in fields:
            if name not in arguments:
                continue
            if skip_empty and _is_blank(arguments[name]):
                continue
            patch.set(rename.get(name, name), arguments[name])
        return patch

    def set(self, name: str, value: Any) -> "Patch":
        self._fields[name] = value
        return self

    def is_empty(self) -> bool:
        return not self._fields

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._fields)

    def __repr__(self) -> str:
        return f"Patch({self._fields!r})"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, (str, list, dict)) and not value)
