"""Convert between nested Python data and XML, and create or update XML
nodes by XPath.

Typical use::

    from xmlarray import Document, add_xpath, from_array, to_array

    doc = Document()
    add_xpath(doc, "/root/parent[@attr='foo']/child", 'value')
    to_array(doc)    # {'root': {'parent': {'@attr': 'foo', 'child': 'value'}}}

    from_array({'foo': {'@id': 'bar'}}).serialize()

The camelCase names :func:`addXPath`, :func:`fromArray` and :func:`toArray`
are provided as aliases.
"""

__version_info__ = (0, 2, 0, None)

# Dot-connect all but the last. Last is dash-connected if not None.
__version__ = '.'.join(str(i) for i in __version_info__[:-1])
if __version_info__[-1] is not None:
    __version__ += ('-%s' % (__version_info__[-1],))

from xmlarray.exceptions import XmlArrayError, InvalidPathError, \
     StructureError, HierarchyRequestError
from xmlarray.xmlmap import Document, load_document_from_string, \
     load_document_from_file, add_xpath, from_array, to_array, flatten

addXPath = add_xpath
fromArray = from_array
toArray = to_array

__all__ = [
    'Document', 'load_document_from_string', 'load_document_from_file',
    'add_xpath', 'from_array', 'to_array', 'flatten',
    'addXPath', 'fromArray', 'toArray',
    'XmlArrayError', 'InvalidPathError', 'StructureError',
    'HierarchyRequestError',
]
