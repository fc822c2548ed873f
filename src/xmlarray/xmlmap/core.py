import io
from lxml import etree

__all__ = [ 'Document', 'parseUri', 'parseString', 'load_document_from_string',
    'load_document_from_file', 'child_elements', 'text_content',
    'set_text_content' ]

def parseUri(stream, uri=None):
    """Read an XML document from a URI, and return a :mod:`lxml.etree`
    document."""
    return etree.parse(stream, base_url=uri)
def parseString(string, uri=None):
    """Read an XML document provided as a string, and return a
    :mod:`lxml.etree` element. Base_uri should be provided for the
    calculation of relative URIs."""
    if isinstance(string, str):
        string = string.encode('utf-8')
    return etree.fromstring(string, base_url=uri)


def child_elements(node, tag=None):
    """List the direct child elements of an lxml element, optionally only
    those named ``tag``, in document order. Comments and processing
    instructions are skipped."""
    if tag is None:
        tag = etree.Element
    return list(node.iterchildren(tag))

def text_content(node):
    """Text content of an element: its leading text plus the tail text of
    each direct child."""
    parts = [node.text or '']
    for child in node:
        parts.append(child.tail or '')
    return ''.join(parts)

def set_text_content(node, value):
    """Replace the text content of an element, leaving its children in place.
    Empty text is dropped so that the element serializes self-closed."""
    node.text = value or None
    for child in node:
        child.tail = None


class Document(object):

    """
    An XML document owning at most one root element.

    lxml has no notion of an empty document, so this thin wrapper holds the
    root :class:`lxml.etree._Element` (or `None`) and takes care of
    serialization. Subclasses may override :attr:`XML_DECLARATION`.
    """

    XML_DECLARATION = '<?xml version="1.0"?>'
    """The declaration written ahead of the markup by :meth:`serialize`."""

    root = None
    """The root element of the document, or `None` for an empty document."""

    def __init__(self, root=None):
        if isinstance(root, etree._ElementTree):
            root = root.getroot()
        self.root = root

    def __repr__(self):
        tag = self.root.tag if self.root is not None else None
        return '<%s root=%r>' % (self.__class__.__name__, tag)

    def serialize(self, stream=None, pretty=False):
        """Serialize the document, declaration included, to a stream.

        If no stream is specified, returns a string. Output always ends with
        a newline; an empty document serializes to the declaration alone.

        :param stream: stream or other file-like object to write content to (optional)
        :param pretty: pretty-print the XML output; boolean, defaults to False
        :rtype: stream passed in or a string
        """
        if stream is None:
            string_mode = True
            stream = io.StringIO()
        else:
            string_mode = False

        stream.write(self.XML_DECLARATION + '\n')
        if self.root is not None:
            markup = etree.tostring(self.root, encoding='unicode',
                                    pretty_print=pretty, with_tail=False)
            stream.write(markup)
            if not markup.endswith('\n'):
                stream.write('\n')

        if string_mode:
            data = stream.getvalue()
            stream.close()
            return data

        return stream

    def __str__(self):
        return self.serialize()


def load_document_from_string(string, parser=None):
    """Initialize a :class:`Document` from a string of XML markup.

    :param string: xml content to be loaded, as a string or bytes
    :param parser: optional :class:`lxml.etree.XMLParser`
    :rtype: :class:`Document`
    """
    if isinstance(string, str):
        string = string.encode('utf-8')
    return Document(etree.fromstring(string, parser))

def load_document_from_file(filename, parser=None):
    """Initialize a :class:`Document` from a file.

    Behaves exactly like :meth:`load_document_from_string` except that it
    takes anything :meth:`lxml.etree.parse` accepts: a file name/path, a file
    object, a file-like object, or an HTTP or FTP url.
    """
    tree = etree.parse(filename, parser)
    return Document(tree.getroot())
