"""
cmdparse prefix mapping.

PrefixMap is a read-mostly name -> value table with two lookup modes:
- exact: the regular Mapping protocol (``table[name]``, ``table.get(name)``).
- prefix: ``table.lookup(query)`` returns the value of the exact key when it
  exists, otherwise the value of the single key starting with ``query``.

Ambiguity is not an error here: a query shared by several keys (or by none)
yields the default, and the caller decides what that means.

Keys are only ever added; there is no deletion.

Example
    >>> table = PrefixMap()
    >>> table.insert("import", 1)
    >>> table.insert("implode", 2)
    >>> table.lookup("impo"), table.lookup("im")
    (1, None)
"""
from collections.abc import Mapping


class PrefixMap(Mapping):
    """
    name -> value table with unique-prefix lookup.

    behavior
    - insert(name, value) refuses names already present (ValueError).
    - exact lookups follow the Mapping protocol.
    - lookup(query) resolves an exact key first, then a unique prefix.
    """
    __slots__ = ("_table",)

    def __init__(self, items=(), /):
        self._table = {}
        for name, value in dict(items).items():
            self.insert(name, value)

    def insert(self, name, value, /):
        if not isinstance(name, str):
            raise TypeError("prefix-map key must be a string")
        if name in self._table:
            raise ValueError(f"prefix-map key {name!r} is already in use")
        self._table[name] = value

    def lookup(self, query, default=None, /):
        """
        resolve ``query`` to a value, accepting unambiguous abbreviations.

        rules
        - an exact key always wins, even when it also prefixes other keys.
        - otherwise exactly one key must start with ``query``.
        - zero or several candidates yield ``default``.
        """
        try:
            return self._table[query]
        except KeyError:
            pass
        candidates = [name for name in self._table if name.startswith(query)]
        if len(candidates) == 1:
            return self._table[candidates[0]]
        return default

    def __getitem__(self, name, /):
        return self._table[name]

    def __iter__(self):
        return iter(self._table)

    def __len__(self):
        return len(self._table)

    def __repr__(self):
        return f"{type(self).__name__}({self._table!r})"

    def __rich_repr__(self):
        yield self._table


__all__ = (
    "PrefixMap",
)
