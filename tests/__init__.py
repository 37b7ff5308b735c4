"""TREESUITE test suite.

Folder taxonomy
- unit/         : Fast checks of one module/class/function (equality rules,
                  the assertion latch, the walker against fake sinks).
- functional/   : User stories told through the CLI.
- e2e/          : CLI options and the ``run`` command end-to-end via CliRunner.
- fixtures/     : Sample package trees and shared fixtures (no tests here).

General guidance
- Trees under test are plain mappings from ``tests.fixtures.packages`` so the
  same tree can be referenced from the CLI as ``module:attribute``.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, functional, e2e, property
"""
