"""CLI entry point for grammar-trainer.

Usage:
  python -m grammar_trainer serve [--port PORT] [--host HOST]
  python -m grammar_trainer stop
  python -m grammar_trainer restart [--port PORT] [--host HOST]
  python -m grammar_trainer status
  python -m grammar_trainer check
  python -m grammar_trainer stats
"""
from __future__ import annotations

import os
import signal
import sys
from pathlib import Path

PID_FILE = Path(__file__).resolve().parent.parent / ".server.pid"


def main():
    args = sys.argv[1:]
    command = args[0] if args else "serve"

    if command == "serve":
        _serve(args[1:])
    elif command == "stop":
        _stop()
    elif command == "restart":
        _restart(args[1:])
    elif command == "status":
        _status()
    elif command == "check":
        _check()
    elif command == "stats":
        _stats()
    else:
        print(f"Unknown command: {command}")
        print("Commands: serve, stop, restart, status, check, stats")
        sys.exit(1)


def _parse_flag(args: list[str], name: str, default: str) -> str:
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return args[i + 1]
    return default


def _read_pid() -> int | None:
    """Read PID from file, return None if stale or missing."""
    if not PID_FILE.exists():
        return None
    try:
        pid = int(PID_FILE.read_text().strip())
        os.kill(pid, 0)
        return pid
    except (ValueError, ProcessLookupError, PermissionError):
        PID_FILE.unlink(missing_ok=True)
        return None


def _write_pid() -> None:
    PID_FILE.write_text(str(os.getpid()))


def _remove_pid() -> None:
    PID_FILE.unlink(missing_ok=True)


def _stop() -> bool:
    """Stop a running server. Returns True if a server was stopped."""
    pid = _read_pid()
    if pid is None:
        print("Server is not running.")
        return False
    try:
        os.kill(pid, signal.SIGTERM)
        print(f"Stopped server (PID {pid}).")
        PID_FILE.unlink(missing_ok=True)
        return True
    except ProcessLookupError:
        print("Server was not running (stale PID file removed).")
        PID_FILE.unlink(missing_ok=True)
        return False


def _status():
    pid = _read_pid()
    if pid is None:
        print("Server is not running.")
    else:
        print(f"Server is running (PID {pid}).")


def _restart(args: list[str]):
    import time
    _stop()
    time.sleep(1)
    _serve(args)


def _serve(args: list[str]):
    import uvicorn

    from grammar_trainer.config import load_settings

    existing = _read_pid()
    if existing is not None:
        print(f"Server already running (PID {existing}). Use 'restart' or 'stop' first.")
        sys.exit(1)

    settings = load_settings()
    port = int(_parse_flag(args, "--port", str(settings.port)))
    host = _parse_flag(args, "--host", settings.host)
    _write_pid()

    print(f"Starting Grammar Trainer on http://{host}:{port}")
    print("Press Ctrl+C to stop\n")
    try:
        uvicorn.run(
            "grammar_trainer.app:app",
            host=host,
            port=port,
            reload=False,
            log_level=settings.log_level.lower(),
            timeout_graceful_shutdown=5,
        )
    finally:
        _remove_pid()


def _check():
    from grammar_trainer.store import QuestionValidationError, load_store

    try:
        store = load_store()
    except QuestionValidationError as e:
        print(f"Question bank is invalid: {e}")
        sys.exit(1)
    print(f"Question bank OK: {len(store)} questions.")


def _stats():
    from grammar_trainer.models import Difficulty, GrammarCategory
    from grammar_trainer.store import load_store

    counts = load_store().counts()

    print("Grammar Trainer Question Bank")
    print("=" * 40)
    print(f"Total questions:    {counts['total']}")
    print()
    print("By category:")
    for c in GrammarCategory:
        print(f"  {c.value:20s}{counts['by_category'][c.value]:>4d}  {c.label}")
    print()
    print("By difficulty:")
    for d in Difficulty:
        print(f"  {d.value:20s}{counts['by_difficulty'][d.value]:>4d}  {d.label}")


if __name__ == "__main__":
    main()
