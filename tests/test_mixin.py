#!/usr/bin/env python3
"""
Unit tests for registry and construct merging.
"""

import unittest

from modkit import Context, ModuleRegistry
from modkit.mixin import merge_constructs, merge_registry


class TestMergeRegistry(unittest.TestCase):
    """Test copying registrations between containers."""

    def test_existing_entries_win(self):
        """Names already in the destination are kept."""
        dest = Context("dest").register("shared", "mine")
        src = Context("src").register("shared", "theirs").register("extra", 1)

        copied = merge_registry(dest, src)

        self.assertEqual(copied, ["extra"])
        self.assertEqual(dest.get("shared"), "mine")
        self.assertEqual(dest.get("extra"), 1)

    def test_reserved_keys_are_not_copied(self):
        """context and globals are never merged."""
        dest = Context("dest")
        src = Context("src")
        src.register("context", src).register("globals", {})

        self.assertEqual(merge_registry(dest, src), [])
        self.assertFalse(dest.has("context"))
        self.assertFalse(dest.has("globals"))

    def test_plain_values_are_aliased(self):
        """Merged plain values are the same objects."""
        counter = {"count": 0}
        dest = Context("dest")
        merge_registry(dest, Context("src").register("counter", counter))

        self.assertIs(dest.get("counter"), counter)

    def test_created_instances_are_not_carried_over(self):
        """Each consumer builds its own instance of a merged factory."""

        class Session:
            pass

        src = Context("src").register("session", Session)
        src_session = src.get("session")

        dest = Context("dest")
        merge_registry(dest, src)
        dest_session = dest.get("session")

        self.assertIsInstance(dest_session, Session)
        self.assertIsNot(dest_session, src_session)
        self.assertIs(src.get("session"), src_session)

    def test_merging_twice_is_harmless(self):
        """Merging the same source twice changes nothing."""
        dest = Context("dest")
        src = Context("src").register("a", 1)

        self.assertEqual(merge_registry(dest, src), ["a"])
        self.assertEqual(merge_registry(dest, src), [])


class TestMergeConstructs(unittest.TestCase):
    """Test copying construct tables between records."""

    def test_existing_constructs_win(self):
        """Constructs already on the destination are kept."""
        registry = ModuleRegistry()
        registry.module("lib").construct("widget", lambda: lambda constructor, name: constructor)
        registry.module("consumer")
        lib = registry.record("lib")
        consumer = registry.record("consumer")

        copied = merge_constructs(consumer, lib)

        self.assertEqual(copied, ["widget"])
        self.assertIs(consumer.constructs["widget"], lib.constructs["widget"])
        self.assertIsNot(consumer.constructs["service"], lib.constructs["service"])


if __name__ == "__main__":
    unittest.main()
