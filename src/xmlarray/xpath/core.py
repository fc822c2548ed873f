# file xmlarray\xpath\core.py
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

import logging
import re
from ply import lex, yacc

from xmlarray.exceptions import InvalidPathError
from xmlarray.xpath import ast
from xmlarray.xpath import lexrules
from xmlarray.xpath import parserules
from xmlarray.xpath.ast import serialize

__all__ = [ 'lexer', 'parser', 'parse', 'serialize' ]

logger = logging.getLogger(__name__)

lexer = lex.lex(module=lexrules, reflags=re.UNICODE)

# tables are small enough to build at import time; don't write parsetab.py
# into the installed package
parser = yacc.yacc(module=parserules, write_tables=False, debug=False)

def parse(xpath):
    """Parse an absolute path expression into a list of steps.

    :param xpath: path expression, e.g. ``/root/parent[@attr='foo']/child``
    :rtype: list of :class:`~xmlarray.xpath.ast.Step`, optionally ending in
        an :class:`~xmlarray.xpath.ast.AttributeStep`
    :raises: :class:`~xmlarray.exceptions.InvalidPathError` if the expression
        is not in the supported subset
    """
    # absolute only, starting at the very first character
    if not isinstance(xpath, str) or not xpath.startswith('/'):
        raise InvalidPathError(xpath)

    try:
        steps = parser.parse(xpath, lexer=lexer.clone())
    except lexrules.PathSyntaxError as err:
        logger.debug('Failed to parse %r: %s', xpath, err)
        raise InvalidPathError(xpath)

    for step in steps[:-1]:
        if isinstance(step, ast.AttributeStep):
            raise InvalidPathError(xpath)
    # a document has no attributes of its own
    if len(steps) == 1 and isinstance(steps[0], ast.AttributeStep):
        raise InvalidPathError(xpath)

    logger.debug('Parsed %r into %d steps', xpath, len(steps))
    return steps
