# file xmlarray\xmlmap\upsert.py
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

"""Locate-or-create ("upsert") XML nodes by path.

:func:`add_xpath` walks a :class:`~xmlarray.xmlmap.core.Document` following
a parsed path, reusing existing elements wherever a step matches one and
creating whatever is missing, then writes a value to the final element or
attribute. Applying the same path twice never duplicates nodes.

Once a path has parsed, the update succeeds with one exception: a document
holds a single root element, so a path whose first step would need a second
root (another tag name, a predicate the root does not match, or a position
above 1) raises :class:`~xmlarray.exceptions.HierarchyRequestError` instead
of creating one. This is a deliberate departure from treating the update
as total.
"""

import logging
from lxml import etree

from xmlarray.exceptions import HierarchyRequestError
from xmlarray.xmlmap.core import Document, child_elements, text_content, \
     set_text_content
from xmlarray.xpath import ast, parse

__all__ = [ 'add_xpath', 'resolve_or_create_child' ]

logger = logging.getLogger(__name__)


def add_xpath(document, xpath, value=None):
    """Set a value in an XML document by path, creating any missing nodes.

    :param document: :class:`~xmlarray.xmlmap.core.Document` to update
    :param xpath: absolute path expression; see :func:`xmlarray.xpath.parse`
    :param value: text content (element steps) or attribute value
        (attribute steps) to write. If `None`, the nodes are created but no
        value is written.
    :returns: the element that was written to; for a trailing attribute
        step, the element owning the attribute
    :raises: :class:`~xmlarray.exceptions.InvalidPathError` for expressions
        outside the supported grammar, and
        :class:`~xmlarray.exceptions.HierarchyRequestError` if the path would
        require a second document root
    """
    steps = parse(xpath)
    if value is not None:
        value = str(value)

    context = document
    for step in steps[:-1]:
        context = resolve_or_create_child(context, step)

    # terminal (rightmost) step informs how we update the xml
    step = steps[-1]
    if isinstance(step, ast.AttributeStep):
        if value is not None:
            context.set(step.name, value)
        elif context.get(step.name) is None:
            context.set(step.name, '')
        return context

    context = resolve_or_create_child(context, step)
    if value is not None:
        set_text_content(context, value)
    return context


def resolve_or_create_child(context, step):
    """Find the child of ``context`` that ``step`` designates, creating and
    appending it (and, for positions, any missing preceding siblings) when
    it does not exist.

    :param context: a :class:`~xmlarray.xmlmap.core.Document` or an lxml
        element
    :param step: :class:`~xmlarray.xpath.ast.Step`
    :rtype: lxml element
    """
    candidates = _candidates(context, step.name)
    predicate = step.predicate

    if predicate is None:
        if candidates:
            return candidates[0]
        return _append(context, _new_element(step.name))

    elif isinstance(predicate, ast.IndexPredicate):
        if len(candidates) >= predicate.index:
            return candidates[predicate.index - 1]
        for i in range(predicate.index - len(candidates)):
            node = _append(context, _new_element(step.name))
        return node

    elif isinstance(predicate, ast.AttributePredicate):
        for candidate in candidates:
            if candidate.get(predicate.name) == predicate.value:
                return candidate
        node = _new_element(step.name)
        node.set(predicate.name, predicate.value)
        return _append(context, node)

    elif isinstance(predicate, ast.ChildPredicate):
        for candidate in candidates:
            for child in child_elements(candidate, predicate.name):
                if text_content(child) == predicate.value:
                    return candidate
        node = _new_element(step.name)
        set_text_content(etree.SubElement(node, predicate.name), predicate.value)
        return _append(context, node)

    raise TypeError('Unsupported predicate %r' % (predicate,))


def _new_element(name):
    logger.debug('Creating element <%s>', name)
    return etree.Element(name)

def _candidates(context, name):
    if isinstance(context, Document):
        # a document has at most one child element: its root
        if context.root is not None and context.root.tag == name:
            return [context.root]
        return []
    return child_elements(context, name)

def _append(context, node):
    if isinstance(context, Document):
        if context.root is not None:
            raise HierarchyRequestError(
                'Cannot add <%s> to a document that already has root <%s>' % \
                (node.tag, context.root.tag))
        context.root = node
    else:
        context.append(node)
    return node
