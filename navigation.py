from dataclasses import dataclass
from typing import Optional

from blueprint import Blueprint, Feature, Role


@dataclass
class SelectionState:
    """Which role, and which feature within that role, is active.

    The mutators never bounds-check. A stale index (for instance after a new
    blueprint with fewer roles arrived) is resolved by the read path, which
    yields ``None`` instead of raising.
    """

    role_index: int = 0
    feature_index: int = 0

    def select_role(self, index: int) -> None:
        self.role_index = index
        # Feature lists differ per role, start from the first one
        self.feature_index = 0

    def select_feature(self, index: int) -> None:
        self.feature_index = index

    def reset(self) -> None:
        self.role_index = 0
        self.feature_index = 0

    def current_role(self, blueprint: Optional[Blueprint]) -> Optional[Role]:
        if blueprint is None:
            return None
        if not 0 <= self.role_index < len(blueprint.roles):
            return None
        return blueprint.roles[self.role_index]

    def current_feature(self, blueprint: Optional[Blueprint]) -> Optional[Feature]:
        """Feature at (role_index, feature_index), or None when out of range.

        Call on every render; the blueprint can change independently of the
        indices so the result must not be cached.
        """
        role = self.current_role(blueprint)
        if role is None:
            return None
        if not 0 <= self.feature_index < len(role.features):
            return None
        return role.features[self.feature_index]

    def to_dict(self) -> dict:
        return {"role_index": self.role_index, "feature_index": self.feature_index}
