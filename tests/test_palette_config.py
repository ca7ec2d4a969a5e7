# tests/test_palette_config.py
"""Palette JSON loading, the load → expand → emit shortcut, and stylesheet rendering."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from color_class_generator.general.utils import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    clear_config_cache,
)
from color_class_generator.palette import (
    DEFAULT_PARAMS,
    DerivationParams,
    InvalidColorError,
    InvalidParameterError,
    StyleRule,
    build_palette_rules,
    expand,
    load_palette,
    render_custom_properties,
    render_stylesheet,
)

REPO_DATA = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Isolated data/ dir; env overrides cleared so base_dir is authoritative."""
    monkeypatch.delenv("PALETTE_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    d = tmp_path / "data"
    d.mkdir()
    clear_config_cache()
    return d


def _write(d: Path, name: str, doc) -> None:
    (d / f"{name}.json").write_text(json.dumps(doc), encoding="utf-8")


# ---------- load_palette ----------
def test_shipped_palette_matches_readme_example():
    colors, params = load_palette(base_dir=REPO_DATA)
    assert list(colors) == ["primary", "secondary", "neutral"]
    assert params == DerivationParams(10, 20, 0.5)


def test_load_palette_params_default_when_absent(data_dir):
    _write(data_dir, "brand", {"colors": {"accent": "tomato"}})
    colors, params = load_palette("brand", base_dir=data_dir)
    assert colors == {"accent": "tomato"}
    assert params == DEFAULT_PARAMS


def test_load_palette_partial_params_merge_over_defaults(data_dir):
    _write(data_dir, "brand", {"colors": {"a": "#000"}, "params": {"trans_amount": 0.25}})
    _, params = load_palette("brand", base_dir=data_dir)
    assert params.trans_amount == 0.25
    assert params.shade_amount == DEFAULT_PARAMS.shade_amount


def test_load_palette_reads_env_data_dir(data_dir, monkeypatch):
    _write(data_dir, "palette", {"colors": {"only": "#fff"}})
    monkeypatch.setenv("PALETTE_DATA_DIR", str(data_dir))
    colors, _ = load_palette()
    assert colors == {"only": "#fff"}


@pytest.mark.parametrize(
    "doc,err",
    [
        ({"colors": ["#fff"]}, ConfigTypeError),
        ({"params": {}}, ConfigTypeError),
        ({"colors": {}, "params": 3}, ConfigTypeError),
        ({"colors": {}, "extra": 1}, ConfigParseError),
        ({"colors": {"has space": "#fff"}}, ConfigParseError),
        ({"colors": {"a.b": "#fff"}}, ConfigParseError),
        ({"colors": {"x#y": "#fff"}}, ConfigParseError),
        ({"colors": {"": "#fff"}}, ConfigParseError),
        ({"colors": {}, "params": {"tint": 3}}, ConfigParseError),
    ],
)
def test_load_palette_shape_errors(data_dir, doc, err):
    _write(data_dir, "broken", doc)
    with pytest.raises(err):
        load_palette("broken", base_dir=data_dir)


def test_load_palette_missing_file(data_dir):
    with pytest.raises(ConfigFileNotFound):
        load_palette("nope", base_dir=data_dir)


def test_load_palette_leaves_value_checks_to_expand(data_dir):
    _write(data_dir, "p", {"colors": {"bad": "nope"}, "params": {"shade_amount": 500}})
    colors, params = load_palette("p", base_dir=data_dir)
    with pytest.raises(InvalidParameterError):
        expand(colors, params)
    with pytest.raises(InvalidColorError):
        expand(colors, DEFAULT_PARAMS)


# ---------- build_palette_rules ----------
def test_build_palette_rules_from_shipped_palette():
    rules = build_palette_rules(base_dir=REPO_DATA)
    assert len(rules) == 36
    assert rules[0] == StyleRule(".color-primary-base", "color", "#6ab446")


# ---------- rendering ----------
def test_render_stylesheet_blocks_in_order():
    rules = [
        StyleRule(".color-a-base", "color", "#ffffff"),
        StyleRule(".bg-a-base", "background-color", "#ffffff"),
    ]
    assert render_stylesheet(rules) == (
        ".color-a-base {\n  color: #ffffff;\n}\n\n"
        ".bg-a-base {\n  background-color: #ffffff;\n}\n"
    )


def test_render_stylesheet_empty():
    assert render_stylesheet([]) == ""


def test_render_custom_properties():
    out = render_custom_properties(expand({"a": "#6ab446"}, DEFAULT_PARAMS))
    lines = out.splitlines()
    assert lines[0] == ":root {" and lines[-1] == "}"
    assert lines[1] == "  --color-a-base: #6ab446;"
    assert lines[-2] == "  --color-a-trans: rgba(106, 180, 70, 0.5);"
    assert len(lines) == 8


def test_render_custom_properties_prefix():
    out = render_custom_properties(expand({"a": "#000"}, DEFAULT_PARAMS), prefix="brand")
    assert "  --brand-a-base: #000000;" in out
