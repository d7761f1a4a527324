"""
Style Preset Resolution for the Paginated Document

A style preset maps each block role (header, subheader, section_title, body,
bullet) to typographic rules. Presets are resolved by overlaying
variant-specific overrides on a base preset, then optional user overrides
from a YAML file.

Examples:
    # Built-in variant
    >>> resolve_style_preset("classic").role("header").alignment
    'center'

    # Unknown ids get the base preset, never an error
    >>> resolve_style_preset("nonexistent").name
    'base'

User override file (STYLE_PRESETS_PATH), same shape as the overrides below:
    base:
      roles:
        body: {font_size: 11}
    modern:
      roles:
        header: {color: "#0f766e"}
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf

from folio.contexts.rendering.logger import _log_debug

load_dotenv()
STYLE_PRESETS_PATH = os.getenv("STYLE_PRESETS_PATH")

BASE_PRESET_NAME = "base"
ROLES = ("header", "subheader", "section_title", "body", "bullet")

# Sizes in points; margins are [left, top, right, bottom]
BASE_STYLE_PRESET = {
    "font_family": "sans",
    "page_margins": [40, 40, 40, 40],
    "roles": {
        "header": {"font_size": 18, "bold": True, "margin": [0, 10, 0, 5]},
        "subheader": {"font_size": 14, "bold": True, "margin": [0, 10, 0, 5]},
        "section_title": {"font_size": 12, "bold": True, "margin": [0, 10, 0, 5]},
        "body": {"font_size": 10, "margin": [0, 0, 0, 5]},
        "bullet": {"font_size": 10, "margin": [0, 0, 0, 5]},
    },
}

VARIANT_STYLE_OVERRIDES = {
    "modern": {
        "roles": {
            "header": {"color": "#2563eb"},
            "section_title": {"color": "#2563eb", "decoration": "underline"},
        },
    },
    "classic": {
        "font_family": "serif",
        "roles": {
            "header": {"alignment": "center"},
            "section_title": {"decoration": "underline", "uppercase": True},
        },
    },
    # One size step down everywhere, tighter margins
    "minimal": {
        "page_margins": [30, 30, 30, 30],
        "roles": {
            "header": {"font_size": 16, "margin": [0, 7, 0, 3]},
            "subheader": {"font_size": 13, "margin": [0, 7, 0, 3]},
            "section_title": {"font_size": 11, "margin": [0, 7, 0, 3]},
            "body": {"font_size": 9, "margin": [0, 0, 0, 3]},
            "bullet": {"font_size": 9, "margin": [0, 0, 0, 3]},
        },
    },
}


@dataclass(frozen=True)
class RoleStyle:
    """Typographic rules for one block role."""

    font_size: float = 10
    bold: bool = False
    italic: bool = False
    color: Optional[str] = None
    alignment: str = "left"
    decoration: Optional[str] = None
    uppercase: bool = False
    margin: Tuple[float, float, float, float] = (0, 0, 0, 0)


@dataclass(frozen=True)
class StylePreset:
    """
    Resolved style for a whole document.

    Attributes:
        name: Variant id the preset was resolved for ("base" for the fallback)
        font_family: "sans" or "serif"
        page_margins: [left, top, right, bottom] in points
        roles: Role name -> RoleStyle
    """

    name: str
    font_family: str
    page_margins: Tuple[float, float, float, float]
    roles: Mapping[str, RoleStyle]

    def role(self, role: str) -> RoleStyle:
        """Style for a role; unknown roles fall back to body."""
        return self.roles.get(str(role), self.roles["body"])


_ROLE_FIELDS = {f.name for f in fields(RoleStyle)}


def _build_role(name: str, config: Dict[str, Any]) -> RoleStyle:
    values = {}
    for key, value in config.items():
        if key not in _ROLE_FIELDS:
            _log_debug(f"Ignoring unknown style key '{key}' for role '{name}'")
            continue
        values[key] = tuple(value) if key == "margin" else value
    return RoleStyle(**values)


def _build_preset(name: str, config: Dict[str, Any]) -> StylePreset:
    roles = config.get("roles", {})
    return StylePreset(
        name=name,
        font_family=config.get("font_family", "sans"),
        page_margins=tuple(config.get("page_margins", BASE_STYLE_PRESET["page_margins"])),
        roles={role: _build_role(role, roles.get(role, {})) for role in ROLES},
    )


def resolve_style_preset(
    variant_id: str,
    overrides: Optional[Dict[str, Any]] = None,
    variant_overrides: Mapping[str, Dict[str, Any]] = VARIANT_STYLE_OVERRIDES,
) -> StylePreset:
    """
    Resolve the style preset for a variant.

    Layers, later wins: base preset, the variant's built-in overrides, the
    user's "base" overrides, the user's overrides for this variant. Unknown
    variant ids resolve to the base preset.

    Args:
        variant_id: Variant identifier (e.g., "classic")
        overrides: User overrides keyed by "base" or variant id (see module docstring)
        variant_overrides: Built-in per-variant overrides

    Returns:
        Fully resolved StylePreset
    """
    overrides = overrides or {}
    variant_id = str(getattr(variant_id, "value", variant_id))
    known = variant_id in variant_overrides or variant_id in overrides

    layers = [OmegaConf.create(BASE_STYLE_PRESET)]
    if variant_id in variant_overrides:
        layers.append(OmegaConf.create(variant_overrides[variant_id]))
    if BASE_PRESET_NAME in overrides:
        layers.append(OmegaConf.create(overrides[BASE_PRESET_NAME]))
    if variant_id in overrides and variant_id != BASE_PRESET_NAME:
        layers.append(OmegaConf.create(overrides[variant_id]))

    merged = OmegaConf.to_container(OmegaConf.merge(*layers), resolve=True)
    return _build_preset(variant_id if known else BASE_PRESET_NAME, merged)


def load_style_overrides(config_path: Path = None) -> Dict[str, Any]:
    """
    Load user style overrides from YAML.

    Args:
        config_path: Path to the overrides file (defaults to STYLE_PRESETS_PATH env variable)

    Returns:
        Overrides keyed by "base" or variant id; {} when no file is configured
    """
    if config_path is None:
        if not STYLE_PRESETS_PATH:
            return {}
        config_path = Path(STYLE_PRESETS_PATH)

    config_path = Path(config_path)
    if not config_path.exists():
        _log_debug(f"No style overrides at {config_path}")
        return {}

    overrides = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    if not isinstance(overrides, dict):
        raise ValueError(f"Style overrides must be a mapping: {config_path}")
    return overrides
