"""Map XML to nested Python data and back.

This package facilitates building and reading XML data using common Pythonic
idioms. Elements map to dict entries, attributes to ``@``-prefixed keys and
repeated siblings to lists; single nodes can be created or updated by XPath.

For developer convenience this package is divided into submodules. Users
should import the names directly from xmlarray.xmlmap. This package exports
the following names:
 * Document -- an XML document owning at most one root element
 * parseUri and parseString -- parse a URI or string into lxml nodes
 * load_document_from_string and load_document_from_file -- parse a string
   or file directly into a Document
 * add_xpath -- create or update the node an XPath designates
 * from_array and to_array -- convert nested data to a Document and back
 * flatten -- express nested data as add_xpath calls
 * Scalar, Mapping, Sequence and structured -- the structured value model

"""

from xmlarray.xmlmap.core import *
from xmlarray.xmlmap.structure import *
from xmlarray.xmlmap.upsert import *
from xmlarray.xmlmap.convert import *
