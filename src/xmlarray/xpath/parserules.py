# file xmlarray\xpath\parserules.py
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

"""XPath parsing rules.

The grammar covers absolute location paths of child and attribute steps,
where each child step may carry one predicate: a position, an attribute
comparison or a child element comparison. Productions build the classes in
:mod:`xmlarray.xpath.ast`; the result of a parse is a list of steps.
"""

from xmlarray.xpath import ast
from xmlarray.xpath.lexrules import tokens, PathSyntaxError

start = 'location_path'

def p_location_path_single(p):
    """
    location_path : PATH_SEP step
    """
    p[0] = [p[2]]

def p_location_path_multiple(p):
    """
    location_path : location_path PATH_SEP step
    """
    p[0] = p[1] + [p[3]]

def p_step_nametest(p):
    """
    step : NCNAME
    """
    p[0] = ast.Step(p[1])

def p_step_predicated(p):
    """
    step : NCNAME OPEN_BRACKET predicate CLOSE_BRACKET
    """
    p[0] = ast.Step(p[1], p[3])

def p_step_attribute(p):
    """
    step : ABBREV_AXIS_AT NCNAME
    """
    p[0] = ast.AttributeStep(p[2])

def p_predicate_index(p):
    """
    predicate : INTEGER
    """
    if p[1] < 1:
        raise PathSyntaxError('positions are 1-based, got %d' % p[1])
    p[0] = ast.IndexPredicate(p[1])

def p_predicate_attribute(p):
    """
    predicate : ABBREV_AXIS_AT NCNAME EQUAL_OP LITERAL
    """
    p[0] = ast.AttributePredicate(p[2], p[4])

def p_predicate_child(p):
    """
    predicate : NCNAME EQUAL_OP LITERAL
    """
    p[0] = ast.ChildPredicate(p[1], p[3])

def p_error(p):
    if p is None:
        raise PathSyntaxError('unexpected end of expression')
    raise PathSyntaxError("unexpected '%s' at position %d" % (p.value, p.lexpos))
