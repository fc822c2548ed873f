# file xmlarray\xmlmap\structure.py
#
#   Copyright 2010 Emory University General Library
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.

"""Structured values: the nested key/value side of the XML mapping.

Plain Python data is wrapped into one of three classes before conversion:

 * :class:`Scalar` -- text content of an element, or an attribute value
 * :class:`Mapping` -- attribute keys (prefixed with :data:`ATTRIBUTE_PREFIX`)
   and element keys, in order
 * :class:`Sequence` -- repeated sibling elements sharing one element key

Use :func:`structured` to wrap plain data and :meth:`plain` to unwrap it.
"""

from xmlarray.exceptions import StructureError

__all__ = [ 'ATTRIBUTE_PREFIX', 'Scalar', 'Mapping', 'Sequence', 'structured',
            'is_attribute_key' ]

ATTRIBUTE_PREFIX = '@'
"Keys starting with this prefix name attributes rather than child elements."

def is_attribute_key(key):
    return key.startswith(ATTRIBUTE_PREFIX)


class Scalar(object):
    "A single text value."

    def __init__(self, value):
        if value is None:
            value = ''
        self.value = str(value)

    def __repr__(self):
        return '<%s %r>' % (self.__class__.__name__, self.value)

    def __eq__(self, other):
        return isinstance(other, Scalar) and self.value == other.value

    def plain(self):
        return self.value

class Mapping(object):
    """An ordered set of named entries.

    Attribute entries must hold a :class:`Scalar`; element entries may hold
    any structured value.
    """

    def __init__(self, entries=None):
        self.entries = []
        for key, value in (entries or []):
            self.add(key, value)

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__,
                            ', '.join(key for key, value in self.entries))

    def __eq__(self, other):
        return isinstance(other, Mapping) and \
            dict(self.entries) == dict(other.entries)

    def __len__(self):
        return len(self.entries)

    def add(self, key, value):
        if is_attribute_key(key) and not isinstance(value, Scalar):
            raise StructureError("Attribute %s must hold a scalar, not %r" % \
                                 (key, value))
        self.entries.append((key, value))

    @property
    def attributes(self):
        "(name, value) pairs for attribute entries, prefix removed."
        return [ (key[len(ATTRIBUTE_PREFIX):], value.value)
                 for key, value in self.entries if is_attribute_key(key) ]

    @property
    def elements(self):
        "(tag, value) pairs for element entries."
        return [ (key, value) for key, value in self.entries
                 if not is_attribute_key(key) ]

    def plain(self):
        return dict((key, value.plain()) for key, value in self.entries)

class Sequence(object):
    "Repeated values under one element key, in document order."

    def __init__(self, items=None):
        self.items = []
        for item in (items or []):
            self.append(item)

    def __repr__(self):
        return '<%s of %d>' % (self.__class__.__name__, len(self.items))

    def __eq__(self, other):
        return isinstance(other, Sequence) and self.items == other.items

    def __len__(self):
        return len(self.items)

    def append(self, item):
        if isinstance(item, Sequence):
            raise StructureError('Sequences cannot be nested directly')
        self.items.append(item)

    def plain(self):
        return [ item.plain() for item in self.items ]


def structured(value):
    """Wrap plain Python data (dicts, lists/tuples, scalars) as a structured
    value. Values that are already structured are returned unchanged.

    :raises: :class:`~xmlarray.exceptions.StructureError` for attribute keys
        holding non-scalars, non-string keys, or nested sequences
    """
    if isinstance(value, (Scalar, Mapping, Sequence)):
        return value
    if isinstance(value, dict):
        mapping = Mapping()
        for key, item in value.items():
            if not isinstance(key, str):
                raise StructureError('Keys must be strings, not %r' % (key,))
            mapping.add(key, structured(item))
        return mapping
    if isinstance(value, (list, tuple)):
        return Sequence(structured(item) for item in value)
    return Scalar(value)
