#!/usr/bin/env python
"""
Run the Streamlit order desk dashboard.

Usage:
    python scripts/run_app.py [SETTINGS_JSON]

Without an argument the dashboard reads $ORDER_DESK_PRICING_FILE, or
pricing_settings.json in the project root.
"""
import os
import subprocess
import sys
from pathlib import Path

import click

project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / 'src'))

from order_desk.config.settings import PRICING_FILE_ENV, settings_file_path  # noqa: E402


@click.command()
@click.argument("settings_json", required=False, type=click.Path(dir_okay=False))
def main(settings_json):
    """Run the Streamlit order desk dashboard."""
    ui_path = project_root / 'src' / 'order_desk' / 'ui' / 'app_streamlit.py'
    if not ui_path.exists():
        print(f"ERROR: UI module not found at {ui_path}")
        sys.exit(1)

    if settings_json:
        os.environ[PRICING_FILE_ENV] = settings_json
    env = os.environ.copy()

    # streamlit runs from the project root; pin the settings file absolutely
    settings_file = settings_file_path(project_root).resolve()
    if not settings_file.exists():
        print(f"WARNING: settings file not found at {settings_file}; default prices will be used")
    else:
        print(f"Using settings: {settings_file}")
    env[PRICING_FILE_ENV] = str(settings_file)

    cmd = [sys.executable, '-m', 'streamlit', 'run', str(ui_path)]
    print(f"Starting Streamlit: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, cwd=str(project_root), env=env)
    except KeyboardInterrupt:
        print("\nApplication stopped.")


if __name__ == "__main__":
    main()
