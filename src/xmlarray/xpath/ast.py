# file xmlarray\xpath\ast.py
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

"""Syntax tree classes for the supported XPath subset.

A parsed path is a plain list of steps. Every step but the last is a
:class:`Step`; the last one may instead be an :class:`AttributeStep`. A
:class:`Step` carries at most one predicate, which is one of
:class:`IndexPredicate`, :class:`AttributePredicate` or
:class:`ChildPredicate`.
"""

__all__ = [
    'serialize',
    'Step',
    'AttributeStep',
    'IndexPredicate',
    'AttributePredicate',
    'ChildPredicate',
    ]

def serialize(xp_ast):
    """Serialize a step list (or a single step or predicate) back into an
    XPath string.

    XPath 1.0 literals have no escape syntax, so a predicate value containing
    both quote characters cannot be serialized and raises :class:`ValueError`.
    """
    return ''.join(_serialize(xp_ast))

def _serialize(xp_ast):
    if isinstance(xp_ast, (list, tuple)):
        for step in xp_ast:
            yield '/'
            for tok in step._serialize():
                yield tok
    else:
        for tok in xp_ast._serialize():
            yield tok

def _quote(literal):
    if '"' in literal and "'" in literal:
        raise ValueError("Literal %r contains both quote characters" % (literal,))
    if '"' in literal:
        return "'%s'" % literal
    return '"%s"' % literal


class Step(object):
    """An element step: a tag name and an optional predicate."""

    def __init__(self, name, predicate=None):
        self.name = name
        self.predicate = predicate

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__,
                serialize(self))

    def _serialize(self):
        yield self.name
        if self.predicate is not None:
            yield '['
            for tok in self.predicate._serialize():
                yield tok
            yield ']'

class AttributeStep(object):
    """A terminal step designating an attribute of the context element."""

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__,
                serialize(self))

    def _serialize(self):
        yield '@'
        yield self.name

class IndexPredicate(object):
    "Select the n-th sibling of a given name; n is 1-based."

    def __init__(self, index):
        self.index = index

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__,
                serialize(self))

    def _serialize(self):
        yield str(self.index)

class AttributePredicate(object):
    "Select the first sibling whose attribute ``name`` equals ``value``."

    def __init__(self, name, value):
        self.name = name
        self.value = value

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__,
                serialize(self))

    def _serialize(self):
        yield '@'
        yield self.name
        yield '='
        yield _quote(self.value)

class ChildPredicate(object):
    """Select the first sibling with a child element ``name`` whose text
    equals ``value``."""

    def __init__(self, name, value):
        self.name = name
        self.value = value

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__,
                serialize(self))

    def _serialize(self):
        yield self.name
        yield '='
        yield _quote(self.value)
