"""
Unit tests for config path resolution. Run from backend directory:
  cd backend && python -m pytest tests/test_core_paths.py -v
"""
import pytest
from pathlib import Path


def test_backend_is_current_or_on_path():
    """Ensure tests run with backend as cwd or on path so 'filtrafood' resolves."""
    from filtrafood import config
    assert config._BACKEND_DIR.is_dir()
    assert (config._BACKEND_DIR / "filtrafood").is_dir()
    assert config._REPO_ROOT.is_dir()
    assert config._REPO_ROOT.name != "filtrafood"


def test_filters_dir_resolution(monkeypatch):
    """Filters dir is repo_root/data/filters unless FILTERS_DIR is set."""
    from filtrafood.config import get_filters_dir, _REPO_ROOT
    monkeypatch.delenv("FILTERS_DIR", raising=False)
    assert get_filters_dir() == _REPO_ROOT / "data" / "filters"
    monkeypatch.setenv("FILTERS_DIR", "/tmp/my-filters")
    assert get_filters_dir() == Path("/tmp/my-filters")


def test_env_getters(monkeypatch):
    from filtrafood import config
    monkeypatch.setenv("OFF_BASE_URL", "https://off.example/api/v2/product/")
    monkeypatch.setenv("INGREDIENT_LOCALES", " ES, fr ,,")
    monkeypatch.setenv("PORT", "8080")
    assert config.get_open_food_facts_base_url() == "https://off.example/api/v2/product"
    assert config.get_ingredient_locales() == ["es", "fr"]
    assert config.get_port() == 8080


def test_shipped_filters_load():
    """When data/filters exists in repo, every shipped filter parses."""
    from filtrafood.config import _REPO_ROOT
    from filtrafood.filters import FilterCatalog
    filters_dir = _REPO_ROOT / "data" / "filters"
    if not filters_dir.is_dir():
        pytest.skip("data/filters directory not found")
    catalog = FilterCatalog.load(filters_dir)
    assert len(catalog) > 0
    assert catalog.get("db_vegan") is not None
    assert catalog.get("db_halal") is not None
    assert "gélatine de porc" in catalog.get("db_halal").keywords


def test_fractional_timeout(monkeypatch):
    import importlib
    from filtrafood import config
    monkeypatch.setenv("OFF_TIMEOUT", "2.5")
    try:
        importlib.reload(config)
        assert config.OFF_TIMEOUT == 2.5
    finally:
        monkeypatch.delenv("OFF_TIMEOUT", raising=False)
        importlib.reload(config)


@pytest.mark.parametrize("raw, expected", [
    ("debug", "DEBUG"),
    (" warning ", "WARNING"),
    ("verbose", "INFO"),
    ("", "INFO"),
])
def test_log_level_falls_back_to_info(monkeypatch, raw, expected):
    from filtrafood.config import get_log_level
    monkeypatch.setenv("LOG_LEVEL", raw)
    assert get_log_level() == expected


def test_log_config_warns_on_invalid_log_level(monkeypatch, caplog):
    import logging
    from filtrafood.config import log_config
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with caplog.at_level(logging.INFO, logger="filtrafood.config"):
        log_config()
    assert "invalid LOG_LEVEL" in caplog.text
