"""Values typed into the generated mock forms.

Values are keyed by the labels that locate a field (role, entity, feature,
field) so they survive role/feature switching. The store is only wiped when a
new description is submitted.
"""

from typing import Dict, List, NamedTuple

from blueprint import Feature, Role

KEY_SEPARATOR = "|"


class FieldKey(NamedTuple):
    role: str
    entity: str
    feature: str
    field: str
    # Number of earlier fields with the same label in the same feature
    occurrence: int = 0

    def encode(self) -> str:
        """Collision-free string form, e.g. ``4:User|4:Task|...``.

        Each component is length-prefixed, so labels that contain the separator
        cannot be confused with a different split.
        """
        parts = [self.role, self.entity, self.feature, self.field, str(self.occurrence)]
        return KEY_SEPARATOR.join(f"{len(p)}:{p}" for p in parts)


def field_keys(role: Role, feature: Feature) -> List[FieldKey]:
    """Keys for every input field of ``feature`` in display order."""
    seen: Dict[str, int] = {}
    keys = []
    for label in feature.input_fields:
        occurrence = seen.get(label, 0)
        seen[label] = occurrence + 1
        keys.append(FieldKey(role.name, feature.entity, feature.name, label, occurrence))
    return keys


class FieldValueStore:
    def __init__(self):
        self._values: Dict[FieldKey, str] = {}

    def get(self, key: FieldKey) -> str:
        return self._values.get(key, "")

    def set(self, key: FieldKey, value: str) -> None:
        self._values[key] = value

    def clear(self) -> None:
        self._values.clear()

    def __len__(self) -> int:
        return len(self._values)

    def as_dict(self) -> Dict[str, str]:
        return {key.encode(): value for key, value in self._values.items()}
