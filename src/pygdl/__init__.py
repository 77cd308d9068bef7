"""pygdl: Game Description Language parser, AST, visitor and printer."""

from .nodes import (
    KEYWORDS,
    Description,
    Rule,
    Clause,
    Sentence,
    Proposition,
    Relation,
    Literal,
    Not,
    Or,
    Distinct,
    Term,
    Variable,
    Function,
    Constant,
    Node,
    const,
    var,
    term,
    func,
    prop,
    rel,
    sentence,
    not_,
    or_,
    distinct,
    rule,
    description,
)
from .errors import GdlError, ParseError
from .parser import GdlParser, parse, parse_sentence, parse_literal, parse_term
from .printer import (
    render,
    render_description,
    render_clause,
    render_rule,
    render_sentence,
    render_literal,
    render_term,
)
from .visitors import (
    Visitor,
    CallbackVisitor,
    traverse,
    traverse_description,
    traverse_clause,
    traverse_rule,
    traverse_sentence,
    traverse_proposition,
    traverse_relation,
    traverse_literal,
    traverse_term,
    traverse_constant,
    traverse_variable,
    traverse_function,
    traverse_not,
    traverse_or,
    traverse_distinct,
)

__version__ = "0.1.0"

__all__ = [
    "KEYWORDS",
    "Description",
    "Rule",
    "Clause",
    "Sentence",
    "Proposition",
    "Relation",
    "Literal",
    "Not",
    "Or",
    "Distinct",
    "Term",
    "Variable",
    "Function",
    "Constant",
    "Node",
    "const",
    "var",
    "term",
    "func",
    "prop",
    "rel",
    "sentence",
    "not_",
    "or_",
    "distinct",
    "rule",
    "description",
    "GdlError",
    "ParseError",
    "GdlParser",
    "parse",
    "parse_sentence",
    "parse_literal",
    "parse_term",
    "render",
    "render_description",
    "render_clause",
    "render_rule",
    "render_sentence",
    "render_literal",
    "render_term",
    "Visitor",
    "CallbackVisitor",
    "traverse",
    "traverse_description",
    "traverse_clause",
    "traverse_rule",
    "traverse_sentence",
    "traverse_proposition",
    "traverse_relation",
    "traverse_literal",
    "traverse_term",
    "traverse_constant",
    "traverse_variable",
    "traverse_function",
    "traverse_not",
    "traverse_or",
    "traverse_distinct",
]
