#!/usr/bin/env python3
"""
Integration tests for several apps sharing modules and globals.
"""

import unittest

from modkit import ModuleRegistry


class TestSharedModules(unittest.TestCase):
    """Test apps composed from the same modules."""

    def setUp(self):
        self.registry = ModuleRegistry()

    def test_factory_services_are_fresh_per_app(self):
        """A factory registered on a shared module is built once per app."""
        results = []

        def make_foo():
            state = {"x": 23}
            return state

        self.registry.module("lib").register("foo", make_foo)
        app1 = self.registry.app("one").use("lib")
        app2 = self.registry.app("two").use("lib")

        def change(foo):
            results.append(foo["x"])
            foo["x"] = 24
            results.append(foo["x"])

        app1.start(change)
        app2.start(lambda foo: results.append(foo["x"]))
        app1.start()
        app2.start()

        self.assertEqual(results, [23, 24, 23])

    def test_plain_values_are_shared_between_apps(self):
        """A singleton value registered on a shared module is the same object everywhere."""
        counter = {"count": 0}
        seen = []
        self.registry.module("lib").register("counter", counter)
        app1 = self.registry.app("one").use("lib")
        app2 = self.registry.app("two").use("lib")

        def bump(counter):
            counter["count"] += 1

        app1.start(bump)
        app2.start(lambda counter: seen.append(counter["count"]))
        app1.start()
        app2.start()

        self.assertEqual(seen, [1])

    def test_shared_module_is_configured_per_app(self):
        """Config callables run once for every app that starts with the module."""
        counter = []
        self.registry.module("lib").config(lambda: counter.append(1))
        self.registry.app("one").use("lib").start()
        self.registry.app("two").use("lib").start()

        self.assertEqual(counter, [1, 1])

    def test_globals_are_shared_across_apps(self):
        """Every app of a registry sees the same globals dict."""
        seen = []
        app1 = self.registry.app("one")
        app2 = self.registry.app("two")

        app1.config(lambda globals: globals.update(rock=23))
        app2.start(lambda globals: seen.append(globals["rock"]))
        app1.start()
        app2.start()

        self.assertEqual(seen, [23])
        self.assertEqual(self.registry.globals, {"rock": 23})

    def test_app_names(self):
        """Each app is injected with its own name."""
        names = []
        for name in ("one", "two"):
            app = self.registry.app(name)
            app.start(lambda app_name: names.append(app_name))
            app.start()

        self.assertEqual(names, ["one", "two"])


if __name__ == "__main__":
    unittest.main()
