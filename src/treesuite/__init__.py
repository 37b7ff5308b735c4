"""TREESUITE

A minimal unit-test execution engine. It walks a hierarchical tree of test
packages, composes the setup and finally hooks inherited from every ancestor
package, runs each test against its own assertion suite and aggregates the
outcomes into a report.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
