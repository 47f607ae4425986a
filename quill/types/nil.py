from __future__ import annotations


class NilType:
    """The empty list and list terminator. Falsy, but distinct from False."""

    __slots__ = ()

    def __repr__(self): return "nil"
    def __bool__(self): return False

    # Nil stands in for the empty list in list primitives
    def __len__(self): return 0
    def __iter__(self): return iter(())

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
