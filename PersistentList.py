# Persistent list module
# Copyright 2012 Benoit Hudson
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation, either version 3 of the License, or
#    (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""
An immutable cons list.  Prepending shares the existing tail rather than
copying it, so any number of lists can hang off the same nodes.  Nothing
ever changes a node once it is built; the interpreter frees a node when the
last list that reaches it goes away.

Every walk over a list is a loop, so long lists never recurse.
"""
import collections.abc
import operator

###
### Nodes.  A list holds exactly one node: either Empty or a Pair.
###

class _EmptyNode(object):
    """The terminal node, shared by every list."""
    __slots__ = ()

    def __bool__(self): return False

    def __repr__(self): return "Empty"

    def __reduce__(self): return "Empty"

Empty = _EmptyNode()
del _EmptyNode

# rest is a PersistentList, not a node.
# Elements are reachable from every list that shares their node, so they
# should be values.  Mutating an element through one list is visible through
# all the others.
Pair = collections.namedtuple("Pair", ["value", "rest"])


class PersistentList(object):
    """Immutable singly-linked list."""
    __slots__ = ('_node',)

    def __new__(cls, items=()):
        if isinstance(items, PersistentList): return items # Immutable, so no copy needed.
        if not isinstance(items, collections.abc.Sequence):
            items = list(items)
        # Prepend from the back so the first item ends up at the head.
        result = cls.nil
        for x in reversed(items):
            result = cls._make(Pair(x, result))
        return result

    @classmethod
    def _make(cls, node):
        obj = super(PersistentList, cls).__new__(cls)
        object.__setattr__(obj, '_node', node)
        return obj

    @classmethod
    def empty(cls):
        return cls.nil

    @classmethod
    def cons(cls, value, tail):
        """
        Return a new list with value in front of tail.  tail is shared, not
        copied, and stays valid.  Anything iterable is accepted as a tail.
        """
        if not isinstance(tail, PersistentList):
            tail = cls(tail)
        return cls._make(Pair(value, tail))

    prepend = cons

    @classmethod
    def from_sequence(cls, items):
        return cls(items)

    def __setattr__(self, name, value):
        raise AttributeError("PersistentList is immutable")

    def __delattr__(self, name):
        raise AttributeError("PersistentList is immutable")

    def decompose(self):
        """
        Return Empty, or the Pair(value, rest) node of this list.  Never
        raises; unpack the Pair to get at the head and the tail.
        """
        return self._node

    # head and tail are not modifiable
    @property
    def head(self):
        if not self._node: raise IndexError("End of list")
        return self._node.value

    @property
    def tail(self):
        if not self._node: raise IndexError("End of list")
        return self._node.rest

    def is_empty(self):
        return not self._node

    def __bool__(self): return bool(self._node)

    # Not cached: recomputed on every call.
    def __len__(self):
        return sum(1 for _ in self)

    length = __len__

    def __iter__(self):
        node = self._node
        while node:
            yield node.value
            node = node.rest._node

    iterate = __iter__

    def reverse(self):
        """
        Return a new list with the elements in the opposite order.  All of
        its nodes are new; the elements themselves are shared.
        """
        result = self.nil
        for x in self:
            result = self._make(Pair(x, result))
        return result

    def _mismatch(self, other):
        """
        Walk both lists in step until their elements differ, one of them
        runs out, or they reach a node they share.  Returns the two nodes
        reached.
        """
        a, b = self._node, other._node
        while a and b and a is not b:
            x, y = a.value, b.value
            if not (x is y or x == y):
                break
            a, b = a.rest._node, b.rest._node
        return a, b

    def __eq__(self, other):
        if not isinstance(other, PersistentList):
            return NotImplemented
        a, b = self._mismatch(other)
        return a is b

    def _order(self, other, op):
        if not isinstance(other, PersistentList):
            return NotImplemented
        a, b = self._mismatch(other)
        if a and b and a is not b:
            return op(a.value, b.value)
        # Ran off the end of one or both: Empty sorts before any Pair.
        return op(bool(a), bool(b))

    def __lt__(self, other): return self._order(other, operator.lt)
    def __le__(self, other): return self._order(other, operator.le)
    def __gt__(self, other): return self._order(other, operator.gt)
    def __ge__(self, other): return self._order(other, operator.ge)

    def __hash__(self):
        return hash(tuple(self))

    def __reduce__(self):
        return PersistentList, (list(self),)

    def __repr__(self):
        return "PersistentList([%s])" % ', '.join(map(repr, self))

# Create the empty list singleton
PersistentList.nil = PersistentList._make(Empty)

nil = PersistentList.nil
cons = PersistentList.cons
