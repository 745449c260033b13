# app/hooks.py
from typing import Protocol


class ResolverHooks(Protocol):
    def rejected(self, *, reason: str, **kw): ...
    def override_dropped(self, *, index: int, reason: str): ...
    def resolved(self, *, branch: str, points: int | None): ...


class NoopHooks:
    def rejected(self, **_):
        pass

    def override_dropped(self, **_):
        pass

    def resolved(self, **_):
        pass
