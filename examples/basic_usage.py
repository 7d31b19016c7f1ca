#!/usr/bin/env python3
"""Basic usage example"""

import logging

from logbridge import Level, RegistryBuilder
from logbridge.listeners import LevelFilterListener, StreamListener


class UserManager:
    pass


def main():
    # Backend output is configured the usual stdlib way
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)-5s %(name)s: %(message)s")

    # Create registry with builder pattern; warnings and above are mirrored to stderr
    registry = (RegistryBuilder()
        .with_level(Level.DEBUG)
        .with_listener(LevelFilterListener(StreamListener(), min_level=Level.WARN))
        .build())

    log = registry.create(UserManager)   # "_.UserManager" when run as a script
    db = registry.create("app.db")

    log.trace("This is trace")
    log.debug("Loaded {} users", 42)
    log.info("Application started")
    db.warn("Pool at {}% of {} connections", 90, 20)

    try:
        {}["missing"]
    except KeyError as exc:
        db.error(exc, "Lookup for {} failed", "missing")

    # Silence everything under "app."
    registry.set_level("app.", Level.FATAL)
    db.error("Not shown")
    log.fatal("This is fatal")


if __name__ == "__main__":
    main()
