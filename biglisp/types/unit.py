from __future__ import annotations


class UnitType:
    """The value of forms with nothing meaningful to return (empty do, println)."""

    _instance: UnitType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"

    def __eq__(self, other):
        return isinstance(other, UnitType)

    def __hash__(self):
        return hash(UnitType)

    def __reduce__(self):
        return (UnitType, ())


Unit = UnitType()
