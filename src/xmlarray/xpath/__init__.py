"""Functions and classes for parsing restricted XPath expressions into step
lists and serializing them back to strings.

This module exports two key functions, :func:`parse` and :func:`serialize`.

.. function:: parse(xpath_str)

   Parse an absolute XPath expression into a list of steps built from the
   classes defined in :mod:`xmlarray.xpath.ast`. Only child steps with an
   optional position, ``@attr='value'`` or ``child='value'`` predicate, and
   a trailing attribute step, are supported.

.. function:: serialize(steps)

   Serialize a list of steps expressed in terms of :mod:`xmlarray.xpath.ast`
   objects into a valid XPath string.

This module does not support evaluating XPath expressions.
"""

from xmlarray.xpath.core import parse, serialize
