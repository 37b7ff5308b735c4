"""Bootstrap (composition root) for TREESUITE.

Assembles the engine at runtime: wires concrete sinks and the serializer into
the package walker.

Import rules:
- Entry points import *this* package (not adapters/service_layer directly).
- This package may import: `treesuite.adapters`, `treesuite.service_layer`,
  `treesuite.interfaces`, `treesuite.domain`, and `treesuite.config`.
- Inner layers must not import `treesuite.bootstrap`.
"""

from .bootstrap import build_sink, build_walker

__all__ = ["build_sink", "build_walker"]
