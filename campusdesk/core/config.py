from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from campusdesk.core.domain.enums import AddOn, RoomType, add_on_from_name, room_type_from_name
from campusdesk.core.rules.eligibility import RULE_BUILDERS

DEFAULT_ELIGIBILITY_CONFIG_ID = "PLACEMENT_V1"
DEFAULT_HOSTEL_CONFIG_ID = "HOSTEL_V1"


@dataclass(frozen=True)
class EligibilityConfig:
    config_id: str
    description: str
    rule_order: tuple[str, ...]
    min_cgpa: float
    min_attendance_pct: float
    min_credits: int


@dataclass(frozen=True)
class HostelPricingConfig:
    config_id: str
    description: str
    room_prices: tuple[tuple[RoomType, float], ...]
    room_fallback: float
    add_on_prices: tuple[tuple[AddOn, float], ...]
    add_on_fallback: float
    deposit: float


def _configs_dir() -> Path:
    return Path(__file__).resolve().parent / "configs"


def _require(payload: dict[str, Any], key: str, expected_type: type) -> Any:
    if key not in payload:
        raise ValueError(f"Missing required field '{key}' in config")
    value = payload[key]
    if expected_type is float:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise ValueError(f"Field '{key}' must be float")
        return float(value)
    if expected_type is int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Field '{key}' must be int")
        return value
    if not isinstance(value, expected_type):
        raise ValueError(f"Field '{key}' must be {expected_type.__name__}")
    return value


def _require_non_negative(payload: dict[str, Any], key: str, expected_type: type) -> Any:
    value = _require(payload, key, expected_type)
    if value < 0:
        raise ValueError(f"Field '{key}' must be >= 0")
    return value


def _read_payload(path: Path) -> dict[str, Any]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError("Config must be a JSON object")
    return payload


def _resolve_path(config_id: str, config_dir: str | Path | None, kind: str) -> Path:
    base = Path(config_dir) if config_dir is not None else _configs_dir()
    path = base / f"{config_id}.json"
    if not path.exists():
        raise ValueError(f"Unknown {kind} config_id: {config_id}")
    return path


def _check_config_id(payload: dict[str, Any], config_id: str | None) -> str:
    loaded_id = _require(payload, "config_id", str)
    if config_id is not None and loaded_id != config_id:
        raise ValueError(f"config_id mismatch: requested '{config_id}', config has '{loaded_id}'")
    return loaded_id


def _parse_eligibility(payload: dict[str, Any], config_id: str | None) -> EligibilityConfig:
    loaded_id = _check_config_id(payload, config_id)

    raw_order = _require(payload, "rule_order", list)
    rule_order: list[str] = []
    for rule_name in raw_order:
        if not isinstance(rule_name, str):
            raise ValueError("Field 'rule_order' must contain strings")
        if rule_name not in RULE_BUILDERS:
            raise ValueError(f"Unknown eligibility rule in 'rule_order': {rule_name}")
        if rule_name in rule_order:
            raise ValueError(f"Duplicate eligibility rule in 'rule_order': {rule_name}")
        rule_order.append(rule_name)

    return EligibilityConfig(
        config_id=loaded_id,
        description=_require(payload, "description", str),
        rule_order=tuple(rule_order),
        min_cgpa=_require_non_negative(payload, "min_cgpa", float),
        min_attendance_pct=_require_non_negative(payload, "min_attendance_pct", float),
        min_credits=_require_non_negative(payload, "min_credits", int),
    )


def _parse_price_list(payload: dict[str, Any], key: str, name_field: str, parse_name) -> tuple:
    entries = _require(payload, key, list)
    parsed = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError(f"Entries of '{key}' must be objects")
        name = _require(entry, name_field, str)
        price = _require_non_negative(entry, "price", float)
        parsed.append((parse_name(name), price))
    return tuple(parsed)


def _parse_hostel(payload: dict[str, Any], config_id: str | None) -> HostelPricingConfig:
    loaded_id = _check_config_id(payload, config_id)
    return HostelPricingConfig(
        config_id=loaded_id,
        description=_require(payload, "description", str),
        room_prices=_parse_price_list(payload, "room_prices", "room_type", room_type_from_name),
        room_fallback=_require_non_negative(payload, "room_fallback", float),
        add_on_prices=_parse_price_list(payload, "add_on_prices", "add_on", add_on_from_name),
        add_on_fallback=_require_non_negative(payload, "add_on_fallback", float),
        deposit=_require_non_negative(payload, "deposit", float),
    )


def load_eligibility_config(
    config_id: str = DEFAULT_ELIGIBILITY_CONFIG_ID, config_dir: str | Path | None = None
) -> EligibilityConfig:
    path = _resolve_path(config_id, config_dir, "eligibility")
    return _parse_eligibility(_read_payload(path), config_id)


def load_eligibility_config_from_path(path: str | Path) -> EligibilityConfig:
    return _parse_eligibility(_read_payload(Path(path)), None)


def load_hostel_pricing_config(
    config_id: str = DEFAULT_HOSTEL_CONFIG_ID, config_dir: str | Path | None = None
) -> HostelPricingConfig:
    path = _resolve_path(config_id, config_dir, "hostel pricing")
    return _parse_hostel(_read_payload(path), config_id)


def load_hostel_pricing_config_from_path(path: str | Path) -> HostelPricingConfig:
    return _parse_hostel(_read_payload(Path(path)), None)
