# file xmlarray\exceptions.py
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

__all__ = [ 'XmlArrayError', 'InvalidPathError', 'StructureError',
            'HierarchyRequestError' ]

class XmlArrayError(Exception):
    "Base class for all errors raised by :mod:`xmlarray`."
    pass

class InvalidPathError(XmlArrayError):
    """A path expression does not conform to the supported XPath subset.

    The offending expression is available as :attr:`xpath`.
    """
    def __init__(self, xpath):
        self.xpath = xpath
        super(InvalidPathError, self).__init__('XPath %s is not valid.' % (xpath,))

class StructureError(XmlArrayError):
    "A structured value cannot be mapped onto an XML tree."
    pass

class HierarchyRequestError(XmlArrayError):
    """A node would have to be inserted where the document does not allow it,
    i.e. as a second document root element."""
    pass
