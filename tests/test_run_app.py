"""
Launcher script: command line and child environment.
"""
import importlib.util
import os
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / 'scripts' / 'run_app.py'


@pytest.fixture(scope="module")
def run_app():
    spec = importlib.util.spec_from_file_location("run_app", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_command_runs_the_page(run_app):
    cmd = run_app.build_command(8600, headless=True)

    assert cmd[:4] == [sys.executable, '-m', 'streamlit', 'run']
    assert cmd[4].endswith(os.path.join('rug_quote', 'ui', 'app_streamlit.py'))
    assert cmd[cmd.index('--server.port') + 1] == '8600'
    assert '--server.headless' in cmd


def test_store_is_exported(run_app, tmp_path, monkeypatch):
    monkeypatch.delenv(run_app.STORE_PATH_ENV, raising=False)
    monkeypatch.delenv('PYTHONPATH', raising=False)
    store = tmp_path / 'prices.json'

    env = run_app.build_env(str(store))

    assert env[run_app.STORE_PATH_ENV] == str(store.resolve())
    assert env['PYTHONPATH'] == str(run_app.PROJECT_ROOT / 'src')


def test_no_store_leaves_environment_alone(run_app, monkeypatch):
    monkeypatch.delenv(run_app.STORE_PATH_ENV, raising=False)
    monkeypatch.setenv('PYTHONPATH', 'elsewhere')

    env = run_app.build_env()

    assert run_app.STORE_PATH_ENV not in env
    assert env['PYTHONPATH'].endswith(os.pathsep + 'elsewhere')
