from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .enums import ChartKind
from .errors import ChartFileError, DatasetError
from .logging_config import get_logger
from .models import ChartConfig, Dataset, to_dataset

logger = get_logger(__name__)


@dataclass(frozen=True)
class ChartDefinition:
    name: str
    kind: ChartKind
    dataset: Dataset
    config: ChartConfig


def _load_yaml(path: Path) -> dict:
    if not path.exists():
        raise ChartFileError(f"Chart file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ChartFileError(f"Chart file {path} is not valid YAML/JSON: {e}") from e


def _parse_chart(name: str, cfg: Any) -> ChartDefinition:
    if not isinstance(cfg, dict):
        raise ChartFileError(f"Chart '{name}' must be a mapping")
    kind_raw = str(cfg.get("kind", "")).lower()
    try:
        kind = ChartKind(kind_raw)
    except ValueError as e:
        raise ChartFileError(
            f"Chart '{name}' has unsupported kind {kind_raw!r} (expected pie or bar)"
        ) from e
    data = cfg.get("data") or []
    if not isinstance(data, list):
        raise ChartFileError(f"Chart '{name}' data must be a list of {{label, value}} items")
    try:
        return ChartDefinition(
            name=name,
            kind=kind,
            dataset=to_dataset(data),
            config=ChartConfig.from_dict(cfg),
        )
    except DatasetError as e:
        raise ChartFileError(f"Chart '{name}' is invalid: {e}") from e


def load_chart_file(path: Path) -> list[ChartDefinition]:
    """Read every chart defined under the ``charts:`` key of a YAML or JSON file."""
    data = _load_yaml(path)
    if not isinstance(data, dict):
        raise ChartFileError(f"Chart file {path} must contain a mapping at the top level")
    charts = data.get("charts", {})
    if not isinstance(charts, dict):
        raise ChartFileError(f"'charts' in {path} must be a mapping of name to chart")
    definitions = [_parse_chart(str(name), cfg) for name, cfg in charts.items()]
    logger.debug("Loaded chart file", extra={"path": str(path), "charts": len(definitions)})
    return definitions


def get_chart(path: Path, name: str) -> ChartDefinition | None:
    for definition in load_chart_file(path):
        if definition.name == name:
            return definition
    return None
