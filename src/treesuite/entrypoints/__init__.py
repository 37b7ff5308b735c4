"""Entrypoints (inbound adapters) for TREESUITE.

Expose the engine to the outside world through the command-line interface.
Parse and validate inputs, call the bootstrap facades, and present results.

Dependency rule: may import `treesuite.bootstrap`, `treesuite.config` and the
domain/interfaces types it presents; avoid importing `treesuite.adapters`
directly.
"""
