"""Ranking config: defaults, validation, loading.

Validation is syntactic (structure and types) plus a small semantic
pass.  Both return lists of error strings; only `load_config()` raises.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path

DEFAULT_CONFIG: dict = {
    "name": "default",
    "ranking": {"top_n": 5, "preview_chars": 120},
    "output": {"precision": 4},
}

MAX_PRECISION = 12


class ConfigError(ValueError):
    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ── Syntactic Validation ────────────────────────────────────────────

def validate_syntactic(config: dict) -> list[str]:
    """Check required fields and types.  Returns list of error strings."""
    errors: list[str] = []

    if not isinstance(config, dict):
        return ["Config must be a JSON object."]

    if not isinstance(config.get("name"), str) or not config["name"]:
        errors.append("'name' is required and must be a non-empty string.")

    ranking = config.get("ranking")
    if not isinstance(ranking, dict):
        errors.append("'ranking' is required and must be an object.")
    else:
        top_n = ranking.get("top_n")
        if not _is_int(top_n) or top_n < 0:
            errors.append("'ranking.top_n' must be an integer >= 0 (0 returns every match).")
        if "preview_chars" in ranking:
            pc = ranking["preview_chars"]
            if not _is_int(pc) or pc < 1:
                errors.append("'ranking.preview_chars' must be a positive integer.")

    # A key that is present must hold a real value; null is not "absent".
    if "output" in config:
        output = config["output"]
        if not isinstance(output, dict):
            errors.append("'output' must be an object if provided.")
        elif "precision" in output:
            precision = output["precision"]
            if not _is_int(precision) or precision < 0 or precision > MAX_PRECISION:
                errors.append(
                    f"'output.precision' must be an integer between 0 and {MAX_PRECISION}."
                )

    return errors


# ── Semantic Validation ─────────────────────────────────────────────

def validate_semantic(config: dict) -> list[str]:
    """Check cross-field consistency."""
    errors: list[str] = []

    unknown = sorted(set(config) - set(DEFAULT_CONFIG))
    if unknown:
        errors.append(
            f"Unknown top-level keys: {unknown}. "
            f"Allowed keys: {sorted(DEFAULT_CONFIG)}."
        )

    ranking = config.get("ranking", {})
    unknown_ranking = sorted(set(ranking) - set(DEFAULT_CONFIG["ranking"]))
    if unknown_ranking:
        errors.append(
            f"Unknown 'ranking' keys: {unknown_ranking}. "
            f"Allowed keys: {sorted(DEFAULT_CONFIG['ranking'])}."
        )

    return errors


def check_config(config: dict) -> list[str]:
    """Syntactic first; semantic only once the structure is sound."""
    errors = validate_syntactic(config)
    if errors:
        return errors
    return validate_semantic(config)


# ── Loading ─────────────────────────────────────────────────────────

def merge_defaults(config: dict) -> dict:
    """Overlay ``config`` on `DEFAULT_CONFIG`, one level deep."""
    merged = copy.deepcopy(DEFAULT_CONFIG)
    for key, value in config.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def _read_json(config_path: str) -> tuple[object, list[str]]:
    path = Path(config_path)
    try:
        return json.loads(path.read_text(encoding="utf-8")), []
    except json.JSONDecodeError as e:
        return None, [f"Invalid JSON: {e}"]
    except UnicodeDecodeError:
        return None, [f"Config file is not valid UTF-8: {config_path}"]
    except FileNotFoundError:
        return None, [f"Config file not found: {config_path}"]


def _resolve(config_path: str) -> tuple[dict | None, list[str]]:
    """Read a file and merge it over the defaults → (merged, errors)."""
    config, errors = _read_json(config_path)
    if errors:
        return None, errors
    if not isinstance(config, dict):
        return None, ["Config must be a JSON object."]

    merged = merge_defaults(config)
    errors = check_config(merged)
    if errors:
        return None, errors
    return merged, []


def validate_config(config_path: str) -> tuple[bool, list[str]]:
    """Validate a config file the way `load_config()` will see it.

    Keys missing from the file fall back to `DEFAULT_CONFIG`, so a
    partial file passes.  Returns (passed, errors).
    """
    _, errors = _resolve(config_path)
    return not errors, errors


def load_config(config_path: str | None = None) -> dict:
    """Defaults, optionally overlaid with a file.  Raises `ConfigError`."""
    if config_path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    merged, errors = _resolve(config_path)
    if errors:
        raise ConfigError(errors)
    return merged
