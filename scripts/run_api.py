#!/usr/bin/env python
"""
Run the Order Desk HTTP API with uvicorn.

Usage:
    python scripts/run_api.py [--port PORT] [--no-reload]
"""
import os
import subprocess
import sys
from pathlib import Path

import click

project_root = Path(__file__).resolve().parent.parent
src_path = str(project_root / "src")
sys.path.insert(0, src_path)

from order_desk.config.settings import PRICING_FILE_ENV, settings_file_path  # noqa: E402


@click.command()
@click.option("--port", type=int, default=8000, show_default=True)
@click.option("--no-reload", is_flag=True, help="Disable auto-reload.")
def main(port: int, no_reload: bool):
    """Run the Order Desk API."""
    env = os.environ.copy()
    if "PYTHONPATH" in env:
        env["PYTHONPATH"] = f"{src_path}{os.pathsep}{env['PYTHONPATH']}"
    else:
        env["PYTHONPATH"] = src_path

    settings_file = settings_file_path(project_root).resolve()
    if not settings_file.exists():
        print(f"WARNING: settings file not found at {settings_file}; default prices will be used")
    env[PRICING_FILE_ENV] = str(settings_file)

    cmd = [
        sys.executable, "-m", "uvicorn",
        "order_desk.api.main:app",
        "--host", "0.0.0.0",
        "--port", str(port),
    ]
    if not no_reload:
        cmd.append("--reload")

    print(f"Starting Order Desk API on port {port} (settings: {settings_file})")
    try:
        subprocess.run(cmd, cwd=str(project_root), env=env)
    except KeyboardInterrupt:
        print("\nAPI stopped.")


if __name__ == "__main__":
    main()
