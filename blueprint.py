"""Application blueprint returned by the extraction service.

The service answers with a nested JSON document (app name -> roles -> features).
This module turns that document into immutable dataclasses and derives the
deduplicated requirements summary shown next to the mock UI.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from constants import (
    APP_NAME_KEYS,
    BUTTONS_KEYS,
    ENTITY_KEYS,
    FEATURE_NAME_KEYS,
    FEATURES_KEYS,
    INPUT_FIELDS_KEYS,
    ROLE_NAME_KEYS,
    ROLES_KEYS,
)
from errors import BlueprintParseError


@dataclass(frozen=True)
class Feature:
    entity: str
    name: str
    input_fields: Tuple[str, ...] = ()
    buttons: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Role:
    name: str
    features: Tuple[Feature, ...] = ()


@dataclass(frozen=True)
class Blueprint:
    app_name: str
    roles: Tuple[Role, ...] = ()


@dataclass(frozen=True)
class RequirementsSummary:
    app_name: str
    roles: Tuple[str, ...] = ()
    entities: Tuple[str, ...] = ()
    features: Tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _pick(data: Dict, keys: Sequence[str], default: Any = None) -> Any:
    """Return the value of the first key present in ``data``."""
    for key in keys:
        if key in data:
            return data[key]
    return default


def _label(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _labels(values: Any) -> Tuple[str, ...]:
    if not isinstance(values, list):
        return ()
    return tuple(_label(v) for v in values if v is not None and not isinstance(v, (dict, list)))


def _objects(values: Any) -> List[Dict]:
    if not isinstance(values, list):
        return []
    return [v for v in values if isinstance(v, dict)]


def parse_blueprint(data: Any) -> Blueprint:
    """Build a :class:`Blueprint` from the decoded response body.

    Parsing is lenient below the top level: missing collections become empty,
    list items that are not objects are skipped. Only a body that is not a
    JSON object at all is rejected.
    """
    if not isinstance(data, dict):
        raise BlueprintParseError(detail=f"expected a JSON object, got {type(data).__name__}")

    roles = []
    for role_data in _objects(_pick(data, ROLES_KEYS)):
        features = tuple(
            Feature(
                entity=_label(_pick(f, ENTITY_KEYS)),
                name=_label(_pick(f, FEATURE_NAME_KEYS)),
                input_fields=_labels(_pick(f, INPUT_FIELDS_KEYS)),
                buttons=_labels(_pick(f, BUTTONS_KEYS)),
            )
            for f in _objects(_pick(role_data, FEATURES_KEYS))
        )
        roles.append(Role(name=_label(_pick(role_data, ROLE_NAME_KEYS)), features=features))

    return Blueprint(app_name=_label(_pick(data, APP_NAME_KEYS, "")), roles=tuple(roles))


def blueprint_to_dict(blueprint: Blueprint) -> Dict:
    """Wire-shaped rendition of ``blueprint`` (used by the raw JSON view)."""
    return {
        APP_NAME_KEYS[0]: blueprint.app_name,
        ROLES_KEYS[0]: [
            {
                ROLE_NAME_KEYS[0]: role.name,
                FEATURES_KEYS[0]: [
                    {
                        ENTITY_KEYS[0]: f.entity,
                        FEATURE_NAME_KEYS[0]: f.name,
                        INPUT_FIELDS_KEYS[0]: list(f.input_fields),
                        BUTTONS_KEYS[0]: list(f.buttons),
                    }
                    for f in role.features
                ],
            }
            for role in blueprint.roles
        ],
    }


# ---------------------------------------------------------------------------
# Requirements summary
# ---------------------------------------------------------------------------


def _distinct(values: Iterable[str]) -> Tuple[str, ...]:
    # dict preserves insertion order, so this keeps first-seen order
    return tuple(dict.fromkeys(values))


def summarize(blueprint: Blueprint) -> RequirementsSummary:
    """Reduce ``blueprint`` to its distinct role, entity and feature names.

    Deduplication spans the whole blueprint, not a single role, and keeps the
    order in which names first appear.
    """
    all_features = [f for role in blueprint.roles for f in role.features]
    return RequirementsSummary(
        app_name=blueprint.app_name,
        roles=_distinct(role.name for role in blueprint.roles),
        entities=_distinct(f.entity for f in all_features),
        features=_distinct(f.name for f in all_features),
    )


def summary_to_dict(summary: Optional[RequirementsSummary]) -> Optional[Dict]:
    if summary is None:
        return None
    return {
        "app_name": summary.app_name,
        "roles": list(summary.roles),
        "entities": list(summary.entities),
        "features": list(summary.features),
    }
