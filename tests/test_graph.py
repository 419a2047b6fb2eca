#!/usr/bin/env python3
"""
Unit tests for uses-graph traversal.
"""

import unittest

from modkit import CyclicModuleError, ModuleRegistry, RegistrySettings, UnknownModuleError
from modkit.graph import UsesGraph


class TestTraversalOrder(unittest.TestCase):
    """Test dependency-first ordering."""

    def setUp(self):
        self.registry = ModuleRegistry()
        self.graph = UsesGraph(self.registry)

    def names(self, start):
        return [record.name for record in self.graph.order(start)]

    def test_dependencies_come_first(self):
        """Used modules are visited before their users."""
        self.registry.module("a")
        self.registry.module("b").use("a")
        self.registry.module("c").use("b")
        self.registry.app("main").use("c", "a")

        self.assertEqual(self.names("main"), ["a", "b", "c", "main"])

    def test_each_module_is_visited_once(self):
        """Diamonds and duplicate uses do not revisit modules."""
        self.registry.module("base")
        self.registry.module("left").use("base")
        self.registry.module("right").use("base", "base")
        self.registry.app("main").use("left", "right").use("left")

        self.assertEqual(self.names("main"), ["base", "left", "right", "main"])

    def test_start_without_uses(self):
        """A module without uses is visited alone."""
        self.registry.app("main")
        self.assertEqual(self.names("main"), ["main"])

    def test_uses_declared_before_creation(self):
        """Names are resolved at traversal time, not at use() time."""
        self.registry.app("main").use("late")
        self.registry.module("late")

        self.assertEqual(self.names("main"), ["late", "main"])


class TestTraversalErrors(unittest.TestCase):
    """Test failures while resolving uses."""

    def setUp(self):
        self.registry = ModuleRegistry()
        self.graph = UsesGraph(self.registry)

    def test_unknown_start(self):
        """Traversing from an unknown name fails."""
        with self.assertRaises(UnknownModuleError):
            self.graph.order("missing")

    def test_unknown_dependency(self):
        """An unknown used name fails with the requiring module."""
        self.registry.module("a").use("missing")
        self.registry.app("main").use("a")

        with self.assertRaises(UnknownModuleError) as ctx:
            self.graph.order("main")

        self.assertEqual(ctx.exception.name, "missing")
        self.assertEqual(ctx.exception.required_by, "a")
        self.assertFalse(ctx.exception.is_app)

    def test_app_cannot_be_used(self):
        """Using an app as a module fails the bootstrap."""
        self.registry.app("other")
        self.registry.app("main").use("other")

        with self.assertRaises(UnknownModuleError) as ctx:
            self.graph.order("main")
        self.assertTrue(ctx.exception.is_app)

    def test_error_happens_before_any_visit(self):
        """Errors in the graph surface before the failing branch is visited."""
        visited = []
        self.registry.module("a")
        self.registry.app("main").use("missing", "a")

        with self.assertRaises(UnknownModuleError):
            self.graph.traverse("main", visited.append)
        self.assertEqual(visited, [])


class TestCycles(unittest.TestCase):
    """Test behaviour on cyclic uses."""

    def build(self, registry):
        registry.module("a").use("b")
        registry.module("b").use("a")
        registry.app("main").use("a")

    def test_cycle_is_skipped_with_warning(self):
        """A back edge is skipped and logged."""
        registry = ModuleRegistry()
        self.build(registry)

        with self.assertLogs("modkit.graph", "WARNING") as logs:
            order = [record.name for record in UsesGraph(registry).order("main")]

        self.assertEqual(order, ["b", "a", "main"])
        self.assertIn("a -> b -> a", logs.output[0])

    def test_cycle_fails_when_configured(self):
        """A back edge raises when the registry fails on cycles."""
        registry = ModuleRegistry(RegistrySettings(fail_on_cycles=True))
        self.build(registry)

        with self.assertRaises(CyclicModuleError) as ctx:
            UsesGraph(registry).order("main")
        self.assertEqual(ctx.exception.cycle, ["a", "b", "a"])


if __name__ == "__main__":
    unittest.main()
