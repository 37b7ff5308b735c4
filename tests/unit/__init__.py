"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- Drive the walker with recording sinks instead of the console.
- No filesystem or environment access outside ``tmp_path``/``monkeypatch``.
"""
