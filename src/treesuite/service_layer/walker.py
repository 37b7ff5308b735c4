"""Package walker: runs every test of a package tree.

The walker enters a package, extends the inherited hook chain with the
package's own ``setup`` and ``finally`` hooks, runs the package's tests in
declaration order and then recurses into its child packages in key order.
Everything happens strictly sequentially: hooks and tests may be coroutines,
but each one is awaited before the next step begins.

Error handling:
- A test that raises is recorded as failed with ``"ErrorName: message"``,
  unless it already reported a failure through its suite, in which case the
  exception is discarded.
- A setup or finally hook that raises aborts the whole run; the exception is
  logged and propagated unchanged.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from treesuite.domain.errors import PackageNotFoundError
from treesuite.domain.package import HookChain, TestPackage
from treesuite.domain.report import AggregateReport, detail_key
from treesuite.domain.suite import Suite

if TYPE_CHECKING:
    from treesuite.domain.package import Hook, TestCase
    from treesuite.interfaces.report import Report
    from treesuite.interfaces.serializer import Serializer
    from treesuite.interfaces.sink import PresentationSink

logger = logging.getLogger(__name__)


def describe_error(error: BaseException) -> str:
    """Return ``"ErrorName"`` or ``"ErrorName: message"`` for an exception."""
    name = type(error).__name__
    message = str(error)
    return f"{name}: {message}" if message else name


async def _call(func: Callable[[Suite], Any], suite: Suite) -> None:
    """Call a hook or test and await its result if it is awaitable."""
    result = func(suite)
    if inspect.isawaitable(result):
        await result


class PackageWalker:
    """Runs a test package tree and aggregates the outcomes.

    Args:
        serializer: Serializer handed to every suite for structural
            assertions.
        sink: Optional presentation sink notified of run events. Without one
            the walker runs headless and produces the same report.
        suite_factory: Callable creating the suite for each test.

    Note:
        One walker may run several times; each run starts from a fresh report.
    """

    def __init__(
        self,
        serializer: Serializer,
        sink: PresentationSink | None = None,
        suite_factory: Callable[[Serializer], Suite] = Suite,
    ) -> None:
        self.serializer = serializer
        self.sink = sink
        self._suite_factory = suite_factory
        self._report = AggregateReport()

    def get_report(self) -> Report:
        """Return an immutable deep copy of the current report.

        Safe to call during or after a run.
        """
        return self._report.snapshot()

    def run(
        self,
        root: TestPackage | Mapping[str, Any],
        path: str,
        select: str | None = None,
    ) -> Report:
        """Run a package tree to completion from synchronous code.

        See :meth:`run_async` for the arguments.
        """
        return asyncio.run(self.run_async(root, path, select))

    async def run_async(
        self,
        root: TestPackage | Mapping[str, Any],
        path: str,
        select: str | None = None,
    ) -> Report:
        """Run a package tree to completion.

        Args:
            root: Root package, or a plain mapping convertible with
                :meth:`TestPackage.from_mapping`.
            path: Dotted name of the root package, prefixed to every detail key.
                An empty path skips the run and leaves the report at zero.
            select: Optional dotted path of a descendant package to run
                instead of the whole tree. Hooks of the packages passed on the
                way down still apply.

        Returns:
            Snapshot of the final report.

        Raises:
            PackageNotFoundError: If *select* names a missing package.
            Exception: Whatever a setup or finally hook raised.
        """
        self._report = AggregateReport()
        package = TestPackage.from_mapping(root)

        if not path:
            logger.info("No package path given; nothing to run")
        else:
            chain = HookChain()
            if select:
                package, chain = self._navigate(package, select)
                path = f"{path}.{select}"
            logger.info("Running %d tests in package %s", package.count_tests(), path)
            await self.process_package(path, package, chain)

        report = self.get_report()
        logger.info(
            "Finished %s: %d executed, %d passed, %d failed",
            path or "<empty run>",
            report.executed,
            report.passed,
            report.failed,
        )
        if self.sink is not None:
            self.sink.on_run_finish(report)
        return report

    @staticmethod
    def _navigate(package: TestPackage, select: str) -> tuple[TestPackage, HookChain]:
        """Descend to a selected subpackage, collecting hooks on the way.

        The target's own hooks are not collected; they are applied when the
        target itself is processed.
        """
        chain = HookChain()
        for name in select.split("."):
            chain = chain.extend(package.setup, package.finalizer)
            if name not in package.children:
                raise PackageNotFoundError(select, name)
            package = package.children[name]
        return package, chain

    async def process_package(
        self, path: str, package: TestPackage, chain: HookChain
    ) -> None:
        """Run a package's own tests, then recurse into its child packages.

        Args:
            path: Dotted path of the package.
            package: The package to process.
            chain: Hooks inherited from the package's ancestors.
        """
        chain = chain.extend(package.setup, package.finalizer)
        logger.debug(
            "Entering package %s (%d setups, %d finalizers)",
            path,
            len(chain.setups),
            len(chain.finalizers),
        )

        for test in package.tests:
            await self.run_one_test(path, test, chain)

        for key, child in package.children.items():
            await self.process_package(f"{path}.{key}", child, chain)

    async def run_one_test(self, path: str, test: TestCase, chain: HookChain) -> None:
        """Run a single test between its inherited setup and finally hooks.

        Args:
            path: Dotted path of the test's package.
            test: The test to run.
            chain: Hooks to run before and after the test.
        """
        name = detail_key(path, test.name)
        if self.sink is not None:
            self.sink.on_test_start(name)

        suite = self._suite_factory(self.serializer)
        await self._run_hooks(chain.setups, suite, name, "setup")
        self._report.executed += 1

        try:
            await _call(test.func, suite)
        except Exception as e:  # pylint: disable=broad-except
            if suite.abort:
                logger.debug(
                    "Discarding %s raised by %s after it failed", describe_error(e), name
                )
            else:
                logger.debug("Test %s raised %s", name, describe_error(e))
                suite.failed(describe_error(e))

        outcome = self._report.record(path, test.name, suite)
        logger.debug("Test %s %s", name, "passed" if outcome.passed else "failed")
        if self.sink is not None:
            self.sink.on_test_finish(name, outcome)

        await self._run_hooks(chain.finalizers, suite, name, "finally")

    @staticmethod
    async def _run_hooks(
        hooks: tuple[Hook, ...], suite: Suite, name: str, kind: str
    ) -> None:
        for hook in hooks:
            try:
                await _call(hook, suite)
            except Exception:
                logger.exception("Exception in %s hook of test %s", kind, name)
                raise
