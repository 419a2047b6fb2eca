#!/usr/bin/env python3
"""
Demonstration of modkit.

This demo shows:
1. Modules registering services
2. Apps using modules and bootstrapping once
3. The service construct and a custom construct
4. Config callables running dependencies first
5. Missing module detection
"""

import logging

from modkit import ModuleRegistry, UnknownModuleError

# Example domain: a small blogging backend built from reusable modules


class Database:
    def __init__(self, settings):
        self.dsn = settings["dsn"]
        self.connected = False

    def query(self, sql: str) -> str:
        assert self.connected, "Not connected to database"
        return f"DB[{self.dsn}]: {sql}"


class PostRepository:
    def __init__(self, database):
        self.database = database

    def all(self) -> str:
        return self.database.query("SELECT * FROM posts")


def repository_creator(logger):
    """Creator for the 'repository' construct: tags classes with a table name."""

    def transform(constructor, name):
        logger.info(f"Building repository {name}")
        constructor.table = name.removesuffix("_repository")
        return constructor

    return transform


def build(registry: ModuleRegistry) -> None:
    settings = registry.module("settings")
    settings.register("settings", {"dsn": "postgres://localhost/blog"})

    storage = registry.module("storage").use("settings")
    storage.service("database", Database)
    storage.construct("repository", repository_creator)
    storage.config(lambda database: setattr(database, "connected", True))

    blog = registry.module("blog").use("storage")
    blog.repository("post_repository", PostRepository, {"count": lambda self: 3})


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    print("1. Composing modules:")
    print("-" * 30)
    registry = ModuleRegistry()
    build(registry)
    print(f"Registered modules: {registry.names()}")

    print("\n2. Starting the app:")
    print("-" * 30)
    app = registry.app("blog-app").use("blog")
    app.start(lambda post_repository: print(post_repository.all()))
    app.start(lambda app_name, post_repository: print(f"{app_name}: {post_repository.count()} posts"))
    app.start()

    print("\n3. Starting twice is a no-op:")
    print("-" * 30)
    app.start()
    print(f"Started: {app.started}")

    print("\n4. Immediate injected calls:")
    print("-" * 30)
    table = app.call(lambda post_repository: post_repository.table)
    print(f"Post repository table: {table}")

    print("\n5. Missing module detection:")
    print("-" * 30)
    broken = registry.app("broken").use("does-not-exist")
    try:
        broken.start()
        print("This shouldn't print - the missing module should be reported")
    except UnknownModuleError as e:
        print(f"Caught expected missing module: {e}")

    print("\nDemo completed successfully!")


if __name__ == "__main__":
    main()
