"""Domain layer for TREESUITE.

Contains the engine's core rules: the immutable test package tree, hook
chains, the per-test assertion suite, equality semantics and the aggregate
report. This package is deliberately framework-agnostic.

Dependency rule: may import `treesuite.interfaces`; do not import from
`treesuite.adapters`, `treesuite.service_layer` or `treesuite.entrypoints`.
"""
