"""
Loading of scenario files.

A scenario file is a YAML document with:
- scenarios: mapping from scenario name to the fields of SimulationConfig
- calibration (optional): fields of Calibration that override the defaults
"""
from __future__ import annotations
from dataclasses import fields, replace
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, Tuple
import logging
import yaml

from climate_sim.constants import CALIBRATION, Calibration
from climate_sim.helpers import ConfigError
from climate_sim.sim.config import SimulationConfig

logger = logging.getLogger(__name__)

KNOWN_TOP_LEVEL = {"scenarios", "calibration"}


def _split_known_keys(data: Dict[str, Any], known: set, where: str) -> Dict[str, Any]:
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning(f"Unknown keys in {where}: {', '.join(unknown)}. These will be ignored.")
    return {key: value for key, value in data.items() if key in known}


def parse_scenarios(data: Dict[str, Any], where: str = "scenario file") -> Tuple[Dict[str, SimulationConfig], Calibration]:
    """
    Builds the scenario configurations and the calibration from an already parsed document.

    Raises
    ------
    ConfigError
        If the document or its sections are not mappings, or a scenario misses a field
    """
    if not isinstance(data, dict):
        raise ConfigError(f"The top level of {where} must be a mapping, got {type(data).__name__}")
    data = _split_known_keys(data, KNOWN_TOP_LEVEL, where)
    raw_scenarios = data.get("scenarios")
    if not isinstance(raw_scenarios, dict) or not raw_scenarios:
        raise ConfigError(f"{where} must define a non-empty 'scenarios' mapping")

    calibration = CALIBRATION
    raw_calibration = data.get("calibration") or {}
    if not isinstance(raw_calibration, dict):
        raise ConfigError(f"'calibration' in {where} must be a mapping")
    if raw_calibration:
        known = {f.name for f in fields(Calibration)}
        calibration = replace(CALIBRATION, **_split_known_keys(raw_calibration, known, f"{where} [calibration]"))

    config_fields = {f.name for f in fields(SimulationConfig)}
    scenarios = {}
    for name, raw in raw_scenarios.items():
        if not isinstance(raw, dict):
            raise ConfigError(f"Scenario '{name}' in {where} must be a mapping")
        raw = _split_known_keys(raw, config_fields, f"{where} [scenarios.{name}]")
        missing = sorted(config_fields - set(raw))
        if missing:
            raise ConfigError(f"Scenario '{name}' in {where} misses: {', '.join(missing)}")
        scenarios[name] = SimulationConfig(**raw)
    return scenarios, calibration


def load_scenarios(path: str | Path) -> Tuple[Dict[str, SimulationConfig], Calibration]:
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return parse_scenarios(data, str(path))


def load_default_scenarios() -> Tuple[Dict[str, SimulationConfig], Calibration]:
    resource = files("climate_sim.data") / "scenarios.yaml"
    return parse_scenarios(yaml.safe_load(resource.read_text(encoding="utf-8")), "default scenarios")
