#!/usr/bin/env python
"""
Launch the rug quote page.

Usage:
    python scripts/run_app.py [--store PATH] [--port 8501] [--headless]

--store points the page at a different local store file (the one holding
the carpetPrices overrides); it is passed on as RUG_QUOTE_STORE_PATH.
"""
import argparse
import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PAGE = PROJECT_ROOT / 'src' / 'rug_quote' / 'ui' / 'app_streamlit.py'
STORE_PATH_ENV = 'RUG_QUOTE_STORE_PATH'


def build_command(port: int, headless: bool) -> list[str]:
    cmd = [sys.executable, '-m', 'streamlit', 'run', str(PAGE), '--server.port', str(port)]
    if headless:
        cmd += ['--server.headless', 'true']
    return cmd


def build_env(store: str = None) -> dict:
    env = os.environ.copy()
    src_path = str(PROJECT_ROOT / 'src')
    if env.get('PYTHONPATH'):
        env['PYTHONPATH'] = f"{src_path}{os.pathsep}{env['PYTHONPATH']}"
    else:
        env['PYTHONPATH'] = src_path
    if store:
        env[STORE_PATH_ENV] = str(Path(store).expanduser().resolve())
    return env


def main():
    parser = argparse.ArgumentParser(description="Run the rug quote calculator")
    parser.add_argument('--store', help="local store JSON file with price overrides")
    parser.add_argument('--port', type=int, default=8501)
    parser.add_argument('--headless', action='store_true', help="do not open a browser")
    args = parser.parse_args()

    if not PAGE.exists():
        print(f"ERROR: page not found at {PAGE}")
        sys.exit(1)

    env = build_env(args.store)
    if STORE_PATH_ENV in env:
        print(f"Price overrides store: {env[STORE_PATH_ENV]}")
    print(f"Calculadora de Alfombras on http://localhost:{args.port}")

    try:
        subprocess.run(build_command(args.port, args.headless), cwd=str(PROJECT_ROOT), env=env)
    except KeyboardInterrupt:
        print("\nCalculator stopped.")


if __name__ == "__main__":
    main()
