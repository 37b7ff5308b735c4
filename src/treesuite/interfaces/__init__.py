"""Interfaces (application boundary) for TREESUITE.

Defines framework-free contracts: ABCs for the presentation sink and the value
serializer, plus the small DTOs passed across them (test outcomes and report
snapshots). Business rules stay out of this package.

Dependency rule: this package is independent; do not import from any other
`treesuite.*` modules. It may be imported by every other layer.
"""
