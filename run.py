#!/usr/bin/env python3
"""
Process launcher: starts FastAPI backend and Streamlit frontend.

Usage:
    python run.py
"""
import subprocess
import sys
import signal
import os
import time

from app.common.constants import API_HOST, API_PORT, UI_PORT

procs = []


def cleanup(*_):
    for p in procs:
        try:
            p.terminate()
        except OSError:
            pass
    for p in procs:
        try:
            p.wait(timeout=5)
        except subprocess.TimeoutExpired:
            p.kill()
    sys.exit(0)


def main():
    signal.signal(signal.SIGINT, cleanup)
    signal.signal(signal.SIGTERM, cleanup)
    root = os.path.dirname(os.path.abspath(__file__))

    # Start FastAPI
    api_proc = subprocess.Popen(
        [sys.executable, "-m", "uvicorn", "api.main:app", "--host", API_HOST, "--port", str(API_PORT), "--reload"],
        cwd=root,
    )
    procs.append(api_proc)
    print(f"FastAPI started on http://localhost:{API_PORT}")

    # Start Streamlit
    st_proc = subprocess.Popen(
        [sys.executable, "-m", "streamlit", "run", "chartscompo_demo.py", "--server.port", str(UI_PORT)],
        cwd=root,
    )
    procs.append(st_proc)
    print(f"Streamlit started on http://localhost:{UI_PORT}")

    # Wait for either to exit
    try:
        while True:
            for p in procs:
                ret = p.poll()
                if ret is not None:
                    print(f"Process {p.args} exited with code {ret}")
                    cleanup()
            time.sleep(1)
    except KeyboardInterrupt:
        cleanup()


if __name__ == "__main__":
    main()
