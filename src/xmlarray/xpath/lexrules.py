# file xmlarray\xpath\lexrules.py
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

"""XPath lexing rules.

To understand how this module works, it is valuable to have a strong
understanding of the `ply <http://www.dabeaz.com/ply/>` module.

Only the tokens needed by the restricted path grammar are recognized:
separators, the ``@`` abbreviation, brackets, ``=``, integers, quoted
literals and NCNames. Anything else is a lexing error.
"""

from ply.lex import TOKEN

class PathSyntaxError(Exception):
    "Raised by the lexer and parser rules on input they cannot handle."
    pass

tokens = [
        'PATH_SEP',
        'ABBREV_AXIS_AT',
        'OPEN_BRACKET',
        'CLOSE_BRACKET',
        'EQUAL_OP',
        'LITERAL',
        'INTEGER',
        'NCNAME',
    ]

t_PATH_SEP = r'/'
t_ABBREV_AXIS_AT = r'@'
t_OPEN_BRACKET = r'\['
t_CLOSE_BRACKET = r'\]'
t_EQUAL_OP = r'='

t_ignore = ' \t\r\n'

def t_LITERAL(t):
    r""""[^"]*"|'[^']*'"""
    t.value = t.value[1:-1]
    return t

def t_INTEGER(t):
    r'[0-9]+'
    t.value = int(t.value)
    return t

# Monster regex derived from:
#  http://www.w3.org/TR/REC-xml/#NT-NameStartChar
#  http://www.w3.org/TR/REC-xml/#NT-NameChar
# EXCEPT:
# Technically those productions allow ':'. NCName, on the other hand:
#  http://www.w3.org/TR/REC-xml-names/#NT-NCName
# explicitly excludes those names that have ':'. We implement this by
# simply removing ':' from our regexes.
NameStartChar = r"[A-Z_a-z\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u02ff" + \
    r"\u0370-\u037d\u037f-\u1fff\u200c-\u200d\u2070-\u218f" + \
    r"\u2c00-\u2fef\u3001-\ud7ff\uf900-\ufdcf\ufdf0-\ufffd" + \
    r"\U00010000-\U000effff]"
# additional characters allowed in NCNames after the first character
NameChar_extras = r"[-.0-9\u00b7\u0300-\u036f\u203f-\u2040]"

NCNAME_REGEX = r'(' + NameStartChar + r')(' + \
                      NameStartChar + r'|' + NameChar_extras + r')*'

@TOKEN(NCNAME_REGEX)
def t_NCNAME(t):
    return t

def t_error(t):
    raise PathSyntaxError("Unknown text '%s'" % (t.value,))
