"""Service layer for TREESUITE.

Implements the run use-case: the package walker that orchestrates hooks, tests
and reporting over a package tree.

Dependency rule: may import `treesuite.domain` and `treesuite.interfaces`, but
not `treesuite.adapters` or `treesuite.entrypoints`.
"""
