"""Parser-scoped backing store for the containers of one value tree."""

from typing import Any


class Arena:
    """
    Owns every list and dict a single parser builds.

    Releasing the arena empties all of them at once, which invalidates the
    tree handed out by the parser. Object keys are interned here as well so
    repeated keys share one string.
    """

    def __init__(self) -> None:
        self._containers: list[list[Any] | dict[str, Any]] = []
        self._keys: dict[str, str] = {}
        self.released = False

    def __len__(self) -> int:
        return len(self._containers)

    def new_array(self) -> list[Any]:
        self._check_live()
        array: list[Any] = []
        self._containers.append(array)
        return array

    def new_object(self) -> dict[str, Any]:
        self._check_live()
        obj: dict[str, Any] = {}
        self._containers.append(obj)
        return obj

    def intern(self, key: str) -> str:
        """Returns the canonical instance of key for this arena."""
        self._check_live()
        return self._keys.setdefault(key, key)

    def release(self) -> None:
        """Empties every owned container. Safe to call more than once."""
        for container in self._containers:
            container.clear()
        self._containers.clear()
        self._keys.clear()
        self.released = True

    def _check_live(self) -> None:
        if self.released:
            raise ValueError("arena has been released")
