"""Tests for run.py: importing the launcher must not touch process state."""

import importlib
import signal

import run


def test_import_installs_no_signal_handlers(monkeypatch):
    installed = []
    monkeypatch.setattr(signal, "signal", lambda sig, handler: installed.append(sig))
    importlib.reload(run)
    assert installed == []
