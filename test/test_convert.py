#!/usr/bin/env python

import unittest
from lxml import etree

from xmlarray import fromArray, toArray
from xmlarray.exceptions import StructureError
from xmlarray.xmlmap import Document, add_xpath, from_array, to_array, \
     flatten, load_document_from_file, parseUri

from testcore import main, fixture_path, read_fixture

SIMPLE = {
    'book': {
        '@id': 'bk101',
        'author': 'Gambardella, Matthew',
        'title': "XML Developer's Guide",
        'genre': 'Computer',
        'price': '44.95',
    },
}

COMPLEX = {
    'catalog': {
        'book': [
            {
                '@id': 'bk101',
                'author': 'Gambardella, Matthew',
                'title': "XML Developer's Guide",
                'cover': {'@format': 'paperback'},
            },
            {
                '@id': 'bk102',
                '@lang': 'en',
                'author': ['Ralls, Kim', 'Corets, Eva'],
                'title': 'Midnight Rain',
                'notes': '',
            },
        ],
        'publisher': {
            'name': "O'Reilly",
            'address': {'city': 'Sebastopol', 'state': 'CA'},
        },
    },
}

# shapes that must survive from_array -> to_array unchanged
ROUND_TRIPS = [
    {},
    {'a': ''},
    {'a': 'text'},
    {'a': {'@id': '1'}},
    {'a': {'@id': '1', '@class': 'x'}},
    {'a': {'b': ''}},
    {'a': {'b': 'text'}},
    {'a': {'b': {'c': {'d': 'deep'}}}},
    {'a': {'b': {'c': {'d': ''}}}},
    {'a': {'b': {'c': {'@d': 'attr only, three levels down'}}}},
    {'a': {'b': ['1', '2']}},
    {'a': {'b': ['', '']}},
    {'a': {'b': ['1', {'@id': '2'}, {'c': ['x', 'y', 'z']}]}},
    {'a': {'@id': 'x', 'b': [{'@n': '1'}, {'@n': '2', 'c': ''}], 'd': 'e'}},
    {'a': {'b': {'c': [{'d': ['1', '2']}, {'d': {'e': ''}}]}}},
    {'a': {'text': '<escaped> & "quoted"'}},
    SIMPLE,
    COMPLEX,
]


class TestFromArray(unittest.TestCase):

    def test_empty(self):
        document = from_array({})
        self.assertTrue(isinstance(document, Document))
        self.assertTrue(document.root is None)
        self.assertEqual('<?xml version="1.0"?>\n', document.serialize(pretty=True))

    def test_single_element_with_attribute(self):
        document = from_array({'foo': {'@id': 'bar'}})
        self.assertEqual('<?xml version="1.0"?>\n<foo id="bar"/>\n',
                         document.serialize(pretty=True))

    def test_simple_structure(self):
        document = from_array(SIMPLE)
        self.assertEqual(read_fixture('simple.xml'), document.serialize(pretty=True))

    def test_complex_structure(self):
        document = fromArray(COMPLEX)
        self.assertEqual(read_fixture('complex.xml'), document.serialize(pretty=True))

    def test_attributes_before_children(self):
        document = from_array({'a': {'b': '1', '@id': 'x', 'c': '2'}})
        self.assertEqual('<?xml version="1.0"?>\n<a id="x"><b>1</b><c>2</c></a>\n',
                         document.serialize())

    def test_scalars(self):
        document = from_array({'a': {'int': 1, 'float': 1.5, 'none': None,
                                     '@flag': True}})
        self.assertEqual({'a': {'@flag': 'True', 'int': '1', 'float': '1.5',
                                'none': ''}},
                         to_array(document))

    def test_empty_mapping_is_empty_element(self):
        document = from_array({'a': {'b': {}}})
        self.assertEqual('<?xml version="1.0"?>\n<a><b/></a>\n', document.serialize())

    def test_empty_sequence(self):
        document = from_array({'a': {'b': [], 'c': '1'}})
        self.assertEqual('<?xml version="1.0"?>\n<a><c>1</c></a>\n', document.serialize())

    def test_fresh_document(self):
        self.assertFalse(from_array(SIMPLE).root is from_array(SIMPLE).root)

    def test_multiple_roots(self):
        self.assertRaises(StructureError, from_array, {'a': '1', 'b': '2'})

    def test_root_attribute(self):
        self.assertRaises(StructureError, from_array, {'@id': '1'})

    def test_repeated_root(self):
        self.assertRaises(StructureError, from_array, {'a': ['1', '2']})

    def test_not_a_mapping(self):
        self.assertRaises(StructureError, from_array, 'a')
        self.assertRaises(StructureError, from_array, ['a'])

    def test_non_scalar_attribute(self):
        self.assertRaises(StructureError, from_array, {'a': {'@id': {'b': 'c'}}})
        self.assertRaises(StructureError, from_array, {'a': {'@id': ['1', '2']}})

    def test_nested_sequence(self):
        self.assertRaises(StructureError, from_array, {'a': {'b': [['1']]}})


class TestToArray(unittest.TestCase):

    def test_empty(self):
        self.assertEqual({}, to_array(Document()))

    def test_simple_structure(self):
        document = load_document_from_file(fixture_path('simple.xml'))
        self.assertEqual(SIMPLE, to_array(document))

    def test_complex_structure(self):
        document = load_document_from_file(fixture_path('complex.xml'))
        self.assertEqual(COMPLEX, toArray(document))

    def test_lxml_input(self):
        tree = parseUri(fixture_path('simple.xml'))
        self.assertEqual(SIMPLE, to_array(tree))
        self.assertEqual(SIMPLE, to_array(tree.getroot()))

    def test_collapse(self):
        node = etree.fromstring('<a><b>1</b><c/><d x="1">ignored</d><e><f/></e></a>')
        self.assertEqual({'a': {'b': '1', 'c': '', 'd': {'@x': '1'},
                                'e': {'f': ''}}},
                         to_array(node))

    def test_grouping_order(self):
        node = etree.fromstring('<a><b>1</b><c>x</c><b>2</b><d/><b>3</b></a>')
        result = to_array(node)['a']
        self.assertEqual(['b', 'c', 'd'], list(result.keys()))
        self.assertEqual(['1', '2', '3'], result['b'])

    def test_attributes_first(self):
        node = etree.fromstring('<a z="1" y="2"><b/></a>')
        self.assertEqual(['@z', '@y', 'b'], list(to_array(node)['a'].keys()))

    def test_ignores_comments(self):
        node = etree.fromstring('<a><!-- note --><b>1</b><?pi x?></a>')
        self.assertEqual({'a': {'b': '1'}}, to_array(node))
        node = etree.fromstring('<a>one<!-- note -->two</a>')
        self.assertEqual({'a': 'onetwo'}, to_array(node))


class TestRoundTrip(unittest.TestCase):

    def test_round_trip(self):
        for value in ROUND_TRIPS:
            self.assertEqual(value, to_array(from_array(value)))

    def test_round_trip_serialized(self):
        for value in ROUND_TRIPS:
            document = from_array(value)
            reloaded = Document(etree.fromstring(document.serialize().encode('utf-8'))) \
                if document.root is not None else Document()
            self.assertEqual(value, to_array(reloaded))

    def test_tree_round_trip(self):
        xml = read_fixture('complex.xml')
        document = from_array(to_array(load_document_from_file(fixture_path('complex.xml'))))
        self.assertEqual(xml, document.serialize(pretty=True))


class TestFlatten(unittest.TestCase):

    def test_empty(self):
        self.assertEqual([], flatten({}))

    def test_paths(self):
        pairs = flatten({'a': {'@id': 'x', 'b': ['1', {'@n': '2'}],
                               'c': {'d': ''}, 'e': {}}})
        self.assertEqual([
            ('/a/@id', 'x'),
            ('/a/b[1]', '1'),
            ('/a/b[2]/@n', '2'),
            ('/a/c/d', None),
            ('/a/e', None),
            ], pairs)

    def test_empty_sequences_only(self):
        self.assertEqual([('/a/b', None)], flatten({'a': {'b': {'c': []}}}))

    def test_replay(self):
        for value in ROUND_TRIPS:
            document = Document()
            for xpath, text in flatten(value):
                add_xpath(document, xpath, text)
            self.assertEqual(from_array(value).serialize(), document.serialize())

    def test_errors(self):
        self.assertRaises(StructureError, flatten, {'a': '1', 'b': '2'})
        self.assertRaises(StructureError, flatten, {'a': {'@id': {}}})


if __name__ == '__main__':
    main()
