__all__ = ["SetIdAllocator", "default_set_ids"]

from itertools import count

# Distinguishes the ids of one allocator from those of another
_namespaces = count()


class SetIdAllocator:
    """Hands out strictly increasing integer identifiers, never reusing one."""

    def __init__(self, start: int = 0):
        self._namespace = next(_namespaces)
        self._ids = count(start)

    @property
    def namespace(self) -> int:
        return self._namespace

    def allocate(self) -> int:
        return next(self._ids)


default_set_ids = SetIdAllocator()
