"""Unit tests for style preset resolution."""

import pytest

from folio.contexts.rendering.style_presets import (
    BASE_PRESET_NAME,
    ROLES,
    load_style_overrides,
    resolve_style_preset,
)


@pytest.mark.unit
def test_base_preset_values():
    preset = resolve_style_preset("nonexistent")

    assert preset.name == BASE_PRESET_NAME
    assert preset.font_family == "sans"
    assert preset.page_margins == (40, 40, 40, 40)
    assert preset.role("header").font_size == 18
    assert preset.role("header").bold
    assert preset.role("header").margin == (0, 10, 0, 5)
    assert preset.role("body").font_size == 10
    assert preset.role("body").margin == (0, 0, 0, 5)
    assert set(preset.roles) == set(ROLES)


@pytest.mark.unit
def test_modern_overrides():
    preset = resolve_style_preset("modern")
    assert preset.role("header").color == "#2563eb"
    assert preset.role("section_title").decoration == "underline"
    # Untouched values come from the base
    assert preset.role("section_title").font_size == 12


@pytest.mark.unit
def test_classic_overrides():
    preset = resolve_style_preset("classic")
    assert preset.font_family == "serif"
    assert preset.role("header").alignment == "center"
    assert preset.role("section_title").uppercase
    assert preset.role("header").color is None


@pytest.mark.unit
def test_minimal_is_one_step_smaller():
    base = resolve_style_preset("nonexistent")
    minimal = resolve_style_preset("minimal")

    for role in ROLES:
        assert minimal.role(role).font_size < base.role(role).font_size
    assert minimal.page_margins[0] < base.page_margins[0]
    assert minimal.role("section_title").margin == (0, 7, 0, 3)


@pytest.mark.unit
def test_unknown_role_falls_back_to_body():
    preset = resolve_style_preset("modern")
    assert preset.role("caption") == preset.role("body")


@pytest.mark.unit
def test_user_overrides_layer_on_top():
    overrides = {
        "base": {"roles": {"body": {"font_size": 11}}},
        "classic": {"roles": {"header": {"color": "#111111", "unknown_key": 1}}},
    }
    classic = resolve_style_preset("classic", overrides)
    modern = resolve_style_preset("modern", overrides)

    assert classic.role("body").font_size == 11
    assert modern.role("body").font_size == 11
    assert classic.role("header").color == "#111111"
    assert classic.role("header").alignment == "center"
    assert modern.role("header").color == "#2563eb"


@pytest.mark.unit
def test_load_style_overrides(tmp_path):
    config = tmp_path / "styles.yaml"
    config.write_text("minimal:\n  roles:\n    body:\n      font_size: 8\n")

    overrides = load_style_overrides(config)
    assert overrides == {"minimal": {"roles": {"body": {"font_size": 8}}}}
    assert resolve_style_preset("minimal", overrides).role("body").font_size == 8
    assert load_style_overrides(tmp_path / "missing.yaml") == {}


@pytest.mark.unit
def test_load_style_overrides_rejects_lists(tmp_path):
    config = tmp_path / "styles.yaml"
    config.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        load_style_overrides(config)
