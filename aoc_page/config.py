"""Page-format phrases and markers, overridable from a YAML file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml

from aoc_page.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "AOC_PAGE_CONFIG"


@dataclass(frozen=True)
class ParserConfig:
    """Markup conventions the extractors key on.

    The defaults match the live site; a YAML override exists so that a
    wording change on the site can be patched without a release.
    """
    first_edition_year: int = 2015
    part_anchor_tag: str = "article"
    part_anchor_class: str = "day-desc"
    success_class: str = "day-success"
    first_half_complete: str = "The first half of this puzzle is complete"
    both_parts_complete: str = "Both parts of this puzzle are complete"
    answer_prefix: str = "Your puzzle answer was"
    puzzle_input_class: str = "puzzle-input"
    unreleased_marker: str = (
        "the link will be enabled on the calendar the instant this puzzle becomes available"
    )


DEFAULT_CONFIG = ParserConfig()


def load_config(path: str | Path | None = None) -> ParserConfig:
    """Load a ``ParserConfig`` from *path*, the env var, or the defaults.

    The YAML file must be a mapping whose keys are ``ParserConfig`` field
    names. Missing keys keep their default.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
        if not path:
            return DEFAULT_CONFIG

    path = Path(path)
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    if raw is None:
        return DEFAULT_CONFIG
    if not isinstance(raw, dict):
        raise ConfigError(f"config {path} must be a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(ParserConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"unknown config keys in {path}: {unknown}")

    for key, value in raw.items():
        expected = int if key == "first_edition_year" else str
        if not isinstance(value, expected) or isinstance(value, bool):
            raise ConfigError(
                f"config key {key!r} must be {expected.__name__}, got {type(value).__name__}"
            )

    logger.info("Loaded parser config from %s (%d overrides)", path, len(raw))
    return replace(DEFAULT_CONFIG, **raw)
