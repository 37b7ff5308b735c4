"""Adapters (infrastructure) for TREESUITE.

Provide concrete implementations of the interfaces: presentation sinks
(headless, logging, rich console) and the JSON value serializer.

Dependency rule: may import `treesuite.interfaces` and `treesuite.domain`; the
domain must not import this package.
"""
