"""
Smoke tests for the Streamlit page, driven through AppTest.
"""
import json
import pytest
import sys
import os
from pathlib import Path

from streamlit.testing.v1 import AppTest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from rug_quote.config import settings as settings_module

APP_PATH = Path(src_path) / 'rug_quote' / 'ui' / 'app_streamlit.py'


@pytest.fixture
def store_path(tmp_path, monkeypatch):
    path = tmp_path / 'local_storage.json'
    monkeypatch.setenv(settings_module.STORE_PATH_ENV, str(path))
    settings_module.reset_settings()
    yield path
    settings_module.reset_settings()


def run_app():
    return AppTest.from_file(str(APP_PATH), default_timeout=30).run()


def test_default_quote(store_path):
    at = run_app()

    assert not at.exception
    assert "121.500" in at.metric[0].value


def test_change_dimensions_and_tier(store_path):
    at = run_app()

    at.selectbox(key="width").set_value(60).run()
    at.selectbox(key="height").set_value(60).run()
    at.button(key="tier_dificil").click().run()

    assert not at.exception
    assert "72.000" in at.metric[0].value


def test_stored_override_is_used(store_path):
    store_path.write_text(json.dumps({"carpetPrices": json.dumps({"intermedio": 18})}), encoding="utf-8")

    at = run_app()

    assert not at.exception
    # 90 × 90 × 18
    assert "145.800" in at.metric[0].value


def test_malformed_store_still_renders(store_path):
    store_path.write_text(json.dumps({"carpetPrices": "{oops"}), encoding="utf-8")

    at = run_app()

    assert not at.exception
    assert "121.500" in at.metric[0].value
