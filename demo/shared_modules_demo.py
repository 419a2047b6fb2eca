#!/usr/bin/env python3
"""
Two apps sharing one module: factories are built per app, values are shared.
"""

from modkit import ModuleRegistry


class Session:
    def __init__(self):
        self.requests = 0


def main() -> None:
    registry = ModuleRegistry()

    shared = registry.module("shared")
    shared.register("session", Session)
    shared.register("stats", {"started_apps": 0})

    for name in ("api", "worker"):
        app = registry.app(name).use("shared")

        def run(app_name, session, stats, globals):
            session.requests += 1
            stats["started_apps"] += 1
            globals.setdefault("apps", []).append(app_name)
            print(f"[{app_name}] session requests: {session.requests}, started apps: {stats['started_apps']}")

        app.start(run)
        app.start()

    print(f"Apps seen through globals: {registry.globals['apps']}")


if __name__ == "__main__":
    main()
