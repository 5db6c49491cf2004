"""A pool that recycles objects instead of building new ones."""


class Factory:
    """Builds objects of one class, reusing those handed back first."""

    def __init__(self, cls) -> None:
        self.cls = cls
        self._pool = []

    def __len__(self) -> int:
        return len(self._pool)

    def create(self, x, y, *args):
        """Return a pooled object reset to ``(x, y)``, or a new one."""
        x, y = float(x), float(y)
        if self._pool:
            obj = self._pool.pop()
            obj.reset(x, y)
            return obj
        return self.cls(x, y, *args)

    def remove(self, obj) -> None:
        """Hand an object back to the pool for later reuse."""
        self._pool.append(obj)