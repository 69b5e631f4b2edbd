#!/usr/bin/env python3
"""
Server runner for the Finance Tracker API.

    python run.py               development server with --reload
    python run.py --production  Gunicorn with Uvicorn workers (gunicorn_conf.py)
"""
import argparse
import os
import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent

APP = "finance_tracker.main:app"


def run_development(port: int):
    """Run the FastAPI server with hot reloading"""
    print("Starting Finance Tracker API...")
    print(f"Server will be available at: http://localhost:{port}")
    print("Press Ctrl+C to stop")

    cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        APP,
        "--host",
        "0.0.0.0",
        "--port",
        str(port),
        "--reload",
    ]

    try:
        subprocess.run(cmd, cwd=str(project_root))
    except KeyboardInterrupt:
        print("\nShutting down server...")


def run_production():
    """Replace this process with Gunicorn so systemd tracks it directly"""
    print("Starting Finance Tracker API (Production Mode)")
    print(f"Environment: {os.getenv('ENVIRONMENT', 'production')}")
    print("Config: gunicorn_conf.py")

    os.environ.setdefault("ENVIRONMENT", "production")
    os.chdir(project_root)
    os.execvp("gunicorn", ["gunicorn", "-c", "gunicorn_conf.py", APP])


def main():
    parser = argparse.ArgumentParser(description="Run the Finance Tracker API.")
    parser.add_argument("--production", action="store_true", help="Run under Gunicorn")
    parser.add_argument("--port", type=int, default=8000, help="Development server port")
    args = parser.parse_args()

    if args.production:
        run_production()
    else:
        run_development(args.port)


if __name__ == "__main__":
    main()
