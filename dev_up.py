# -----------------------------------------------------------------------------
# dev_up.py: local launcher for the Polynomial Root Solver
# Starts the FastAPI service, waits for /health, smoke-tests /solve with a
# known quadratic, then starts the Streamlit UI and relays both logs.
#   - API binds to API_HOST; health and smoke requests go to a connectable host
#   - src/ is added to PYTHONPATH so polyroots imports without an install
# -----------------------------------------------------------------------------

from __future__ import annotations
import os
import shutil
import subprocess
import sys
import threading
import time
from pathlib import Path
from typing import Dict, List

import requests
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.resolve()
load_dotenv(PROJECT_ROOT / ".env")

API_APP = "api.main:app"
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
UI_PORT = int(os.getenv("UI_PORT", "8501"))
UI_ADDRESS = os.getenv("STREAMLIT_SERVER_ADDRESS", "0.0.0.0")
UI_FILE = PROJECT_ROOT / "ui" / "app.py"
PYTHONPATH_APPEND = str(PROJECT_ROOT / "src")
SMOKE_EXPRESSION = "x^2 - 3x + 2"
SMOKE_ROOTS = [1.0, 2.0]

def echo(msg: str): print(f"[dev_up] {msg}", flush=True)

def client_host(bind_host: str) -> str:
    # a wildcard bind address is not something a client can connect to
    return "127.0.0.1" if bind_host in ("0.0.0.0", "0") else bind_host

def with_src_path(env: Dict[str, str]) -> Dict[str, str]:
    env = dict(env)
    env["PYTHONPATH"] = (env.get("PYTHONPATH", "") + os.pathsep + PYTHONPATH_APPEND).strip(os.pathsep)
    return env

def api_command(host: str, port: int) -> List[str]:
    return [sys.executable, "-m", "uvicorn", API_APP, "--host", host, "--port", str(port), "--reload"]

def ui_command(port: int, address: str, headless: str = "true") -> List[str]:
    return [
        sys.executable, "-m", "streamlit", "run", str(UI_FILE),
        "--server.port", str(port),
        "--server.address", address,
        "--server.headless", headless,
    ]

def free_port(port: int):
    # POSIX only; lsof lists the PIDs listening on the port
    if shutil.which("lsof") is None:
        return
    pids = subprocess.run(["lsof", "-t", f"-i:{port}"], capture_output=True, text=True).stdout.split()
    for pid in pids:
        echo(f"Killing PID {pid} on port {port}")
        subprocess.run(["kill", "-9", pid])

def wait_for_api(base_url: str, timeout: float = 60.0) -> bool:
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            if requests.get(f"{base_url}/health", timeout=2).status_code == 200:
                return True
        except requests.RequestException:
            time.sleep(0.4)
    return False

def smoke_solve(base_url: str) -> bool:
    """POST a known quadratic to /solve and check both roots come back."""
    try:
        body = requests.post(f"{base_url}/solve", json={"expression": SMOKE_EXPRESSION}, timeout=5).json()
    except (requests.RequestException, ValueError) as e:
        echo(f"Smoke solve failed: {e}")
        return False
    return body.get("ok") is True and sorted(body.get("roots", [])) == SMOKE_ROOTS

def start(name: str, cmd: List[str]) -> subprocess.Popen:
    echo(f"Starting {name}: {' '.join(cmd)}")
    proc = subprocess.Popen(cmd, cwd=str(PROJECT_ROOT), env=with_src_path(os.environ),
                            stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True)
    threading.Thread(target=_relay, args=(name, proc), daemon=True).start()
    return proc

def _relay(name: str, proc: subprocess.Popen):
    for line in proc.stdout:
        print(f"[{name}] {line}", end="")

def main():
    base_url = f"http://{client_host(API_HOST)}:{API_PORT}"
    os.environ.setdefault("API_URL", base_url)
    for port in (API_PORT, UI_PORT):
        free_port(port)

    procs = [start("API", api_command(API_HOST, API_PORT))]
    try:
        if not wait_for_api(base_url):
            echo("API failed to become ready in time.")
            return 1
        if smoke_solve(base_url):
            echo(f"/solve smoke test passed ({SMOKE_EXPRESSION})")
        else:
            echo(f"/solve smoke test did not return {SMOKE_ROOTS} for {SMOKE_EXPRESSION}")

        procs.append(start("UI", ui_command(UI_PORT, UI_ADDRESS)))
        echo(f"UI: http://localhost:{UI_PORT}  API docs: {base_url}/docs")
        while all(p.poll() is None for p in procs):
            time.sleep(0.5)
    except KeyboardInterrupt:
        echo("Shutting down...")
    finally:
        for p in procs:
            if p.poll() is None:
                p.terminate()
    return 0

if __name__ == "__main__":
    sys.exit(main())
