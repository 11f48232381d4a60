from typing import Dict, List

import pandas as pd

from blueprint import Blueprint, RequirementsSummary

FEATURE_TABLE_COLUMNS = ["role", "entity", "feature", "input_fields", "buttons"]


def blueprint_table(blueprint: Blueprint) -> pd.DataFrame:
    """One row per (role, feature) pair, in blueprint order."""
    rows: List[Dict] = []
    for role in blueprint.roles:
        for feature in role.features:
            rows.append(
                {
                    "role": role.name,
                    "entity": feature.entity,
                    "feature": feature.name,
                    "input_fields": ", ".join(feature.input_fields),
                    "buttons": ", ".join(feature.buttons),
                }
            )
    return pd.DataFrame(rows, columns=FEATURE_TABLE_COLUMNS)


def summary_counts(summary: RequirementsSummary) -> Dict[str, int]:
    return {
        "Roles": len(summary.roles),
        "Entities": len(summary.entities),
        "Features": len(summary.features),
    }
