from __future__ import annotations


class NilType:
    """The empty list. Equal only to itself."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "()"
    def __bool__(self): return False

    def __iter__(self):
        return iter(())

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
