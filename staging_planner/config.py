from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict

import yaml

from staging_planner.errors import PlanConfigError
from staging_planner.io import build_alias_table
from staging_planner.models import RecordDraft

DEFAULT_CONFIG_YAML = """
plan:
  discard_missing_fnsku: false
  sort: true
  expand: false
  header_aliases: {}
""".strip()

DRAFT_FIELDS = {f.name for f in fields(RecordDraft)}


@dataclass
class PlanConfig:
    discard_missing_fnsku: bool = False
    sort: bool = True
    expand: bool = False
    header_aliases: Dict[str, str] = field(default_factory=dict)

    def alias_table(self) -> dict[str, str]:
        return build_alias_table(self.header_aliases)

    def builder_options(self) -> dict:
        return {
            "discard_missing_fnsku": self.discard_missing_fnsku,
            "aliases": self.alias_table(),
        }


def _parse_flag(data: dict, key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise PlanConfigError(f"plan.{key} must be true or false, got {value!r}")
    return value


def _parse_aliases(value) -> dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise PlanConfigError("plan.header_aliases must be a mapping of header to field")
    aliases: dict[str, str] = {}
    for alias, target in value.items():
        if target not in DRAFT_FIELDS:
            raise PlanConfigError(f"header alias '{alias}' points to unknown field '{target}'")
        aliases[str(alias)] = target
    return aliases


def load_config(config_yaml: str) -> PlanConfig:
    try:
        data = yaml.safe_load(config_yaml) or {}
    except yaml.YAMLError as exc:
        raise PlanConfigError(f"config is not valid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise PlanConfigError("config must be a YAML mapping")
    plan = data.get("plan") or {}
    if not isinstance(plan, dict):
        raise PlanConfigError("plan section must be a mapping")
    unknown = sorted(set(plan) - {f.name for f in fields(PlanConfig)})
    if unknown:
        raise PlanConfigError(f"unknown plan settings: {', '.join(unknown)}")
    return PlanConfig(
        discard_missing_fnsku=_parse_flag(plan, "discard_missing_fnsku", False),
        sort=_parse_flag(plan, "sort", True),
        expand=_parse_flag(plan, "expand", False),
        header_aliases=_parse_aliases(plan.get("header_aliases")),
    )


def load_config_path(path: str | Path) -> PlanConfig:
    return load_config(Path(path).read_text(encoding="utf-8"))
