"""Convention lookup by id."""
from collections import namedtuple

from absl import logging


Convention = namedtuple("Convention", ["id", "name", "description", "tree"])


class UnknownConventionError(KeyError):
    pass


class DuplicateConventionError(ValueError):
    pass


class Registry:
    def __init__(self, conventions=()):
        self._conventions = {}
        for c in conventions:
            self.register(c)

    def register(self, convention):
        if convention.id in self._conventions:
            raise DuplicateConventionError(
                f"convention {convention.id!r} is already registered")
        self._conventions[convention.id] = convention
        logging.info("registered convention %s", convention.id)

    def get(self, convention_id):
        try:
            return self._conventions[convention_id]
        except KeyError:
            available = ", ".join(self._conventions) or "(none)"
            raise UnknownConventionError(
                f"unknown convention {convention_id!r}, available: {available}"
            ) from None

    def find(self, convention_id):
        """Like get(), but None for an unregistered id."""
        return self._conventions.get(convention_id)

    def ids(self):
        return list(self._conventions)

    def clear(self):
        self._conventions.clear()

    def __call__(self, convention_id):
        return self.find(convention_id)

    def __contains__(self, convention_id):
        return convention_id in self._conventions

    def __len__(self):
        return len(self._conventions)


def default_registry():
    """A fresh Registry holding the bundled conventions."""
    from bidlogic.conventions import (
        bergen, dont, gerber, landy, sayc, stayman)
    return Registry([stayman.convention(), gerber.convention(),
                     landy.convention(), bergen.convention(),
                     dont.convention(), sayc.convention()])
