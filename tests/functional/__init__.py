"""Functional tests.

Purpose
- Walk through what a user sees when they first use the CLI.

Guidelines
- Treat the CLI as a black box; assert on output and exit codes only.
"""
