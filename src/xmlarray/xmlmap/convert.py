# file xmlarray\xmlmap\convert.py
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

'''Convert between nested Python data and XML documents.

 * :func:`from_array` -- build a :class:`~xmlarray.xmlmap.core.Document`
   from nested dicts, lists and scalars
 * :func:`to_array` -- the inverse: read a document back into nested data
 * :func:`flatten` -- express nested data as a list of path/value pairs
   that :func:`~xmlarray.xmlmap.upsert.add_xpath` can replay

Both directions share one convention: an element without attributes and
without child elements is represented by its text alone. Keys beginning
with ``@`` are attributes; a list under a key produces repeated siblings.
For example::

    {'book': {'@id': '7', 'title': 'Emma', 'author': ['Jane', 'Anon']}}

corresponds to::

    <book id="7"><title>Emma</title><author>Jane</author><author>Anon</author></book>
'''

from lxml import etree

from xmlarray.exceptions import StructureError
from xmlarray.xmlmap.core import Document, child_elements, text_content
from xmlarray.xmlmap.structure import ATTRIBUTE_PREFIX, Scalar, Mapping, \
     Sequence, structured, is_attribute_key
from xmlarray.xpath import ast, serialize

__all__ = [ 'from_array', 'to_array', 'flatten' ]


def collapses(attributes, elements):
    """True when a node with these attributes and child elements is
    represented as a bare scalar."""
    return not attributes and not elements


def from_array(value):
    """Build a new :class:`~xmlarray.xmlmap.core.Document` from nested data.

    An empty dict gives a document with no root element. Otherwise the dict
    must have exactly one (non-attribute) key, naming the root element.

    :raises: :class:`~xmlarray.exceptions.StructureError` if the data cannot
        be expressed as a single-rooted XML tree
    """
    document = Document()
    entry = _root_entry(structured(value))
    if entry is not None:
        document.root = _build_element(*entry)
    return document

def _root_entry(value):
    if not isinstance(value, Mapping):
        raise StructureError('Top-level value must be a mapping, not %r' % (value,))
    if not len(value):
        return None
    if len(value) > 1:
        raise StructureError('A document has a single root element; got %s' % \
                             ', '.join(key for key, item in value.entries))
    tag, node = value.entries[0]
    if is_attribute_key(tag):
        raise StructureError('The root entry %s is not an element key' % tag)
    if isinstance(node, Sequence):
        raise StructureError('The root element %s cannot be repeated' % tag)
    return tag, node

def _build_element(tag, node):
    element = etree.Element(tag)
    if isinstance(node, Scalar):
        element.text = node.value or None
    elif isinstance(node, Mapping):
        # attributes go on before any children are appended
        for name, value in node.attributes:
            element.set(name, value)
        for child_tag, child in node.elements:
            if isinstance(child, Sequence):
                for item in child.items:
                    element.append(_build_element(child_tag, item))
            else:
                element.append(_build_element(child_tag, child))
    else:
        raise StructureError('Cannot build element %s from %r' % (tag, node))
    return element


def to_array(document):
    """Read an XML document into nested data; the inverse of
    :func:`from_array`.

    :param document: a :class:`~xmlarray.xmlmap.core.Document`, an lxml
        ElementTree or an lxml element (treated as the root)
    :rtype: dict; empty if the document has no root element
    """
    if isinstance(document, Document):
        root = document.root
    elif isinstance(document, etree._ElementTree):
        root = document.getroot()
    else:
        root = document
    if root is None:
        return {}
    return {root.tag: _build_value(root).plain()}

def _build_value(element):
    elements = child_elements(element)
    if collapses(element.attrib, elements):
        return Scalar(text_content(element))

    mapping = Mapping()
    for name, value in element.attrib.items():
        mapping.add(ATTRIBUTE_PREFIX + name, Scalar(value))

    # group by tag, in order of first appearance
    groups = {}
    for child in elements:
        groups.setdefault(child.tag, []).append(_build_value(child))
    for tag, values in groups.items():
        if len(values) == 1:
            mapping.add(tag, values[0])
        else:
            mapping.add(tag, Sequence(values))
    return mapping


def flatten(value):
    """Express nested data as an ordered list of ``(xpath, value)`` pairs.

    Applying :func:`~xmlarray.xmlmap.upsert.add_xpath` for every pair, in
    order, to an empty document builds the same tree as :func:`from_array`.
    Repeated siblings are addressed by position. Elements with neither
    attributes nor children (other than empty text) get a value of `None`.

    :raises: :class:`~xmlarray.exceptions.StructureError`, as
        :func:`from_array`
    """
    pairs = []
    entry = _root_entry(structured(value))
    if entry is not None:
        tag, node = entry
        _flatten([ast.Step(tag)], node, pairs)
    return pairs

def _flatten(steps, node, pairs):
    if isinstance(node, Scalar):
        pairs.append((serialize(steps), node.value or None))
        return

    if collapses(node.attributes, node.elements):
        pairs.append((serialize(steps), None))
        return

    before = len(pairs)
    for name, value in node.attributes:
        pairs.append((serialize(steps + [ast.AttributeStep(name)]), value))
    for tag, child in node.elements:
        if isinstance(child, Sequence):
            for index, item in enumerate(child.items, 1):
                step = ast.Step(tag, ast.IndexPredicate(index))
                _flatten(steps + [step], item, pairs)
        else:
            _flatten(steps + [ast.Step(tag)], child, pairs)
    if len(pairs) == before:
        # only empty sequences below; the element itself must still exist
        pairs.append((serialize(steps), None))
