from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Iterable, Optional

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from .errors import ParseError
from .grammar import GDL_GRAMMAR
from .nodes import (
    Constant,
    Description,
    Distinct,
    Function,
    Literal,
    Not,
    Or,
    Proposition,
    Relation,
    Rule,
    Sentence,
    Term,
    Variable,
)

logger = logging.getLogger(__name__)

_START_RULES = ("description", "sentence_only", "literal_only", "term_only")

_TOKEN_NAMES = {
    "_LPAR": "'('",
    "_RPAR": "')'",
    "_IMPLIES": "'<='",
    "_NOT": "'not'",
    "_OR": "'or'",
    "_DISTINCT": "'distinct'",
    "NAME": "constant",
    "VARIABLE": "variable",
    "$END": "end of input",
}

_KEYWORD_TOKENS = frozenset({"_IMPLIES", "_NOT", "_OR", "_DISTINCT"})


@v_args(inline=True)
class GdlTransformer(Transformer):
    """Builds AST nodes while the LALR parser reduces, so no parse tree is kept."""

    def description(self, *clauses):
        return Description(clauses)

    def sentence_only(self, node):
        return node

    def literal_only(self, node):
        return node

    def term_only(self, node):
        return node

    def rule(self, head, *body):
        return Rule(head, body)

    def relation(self, name, *args):
        return Relation(name, args)

    def proposition(self, name):
        return Proposition(name)

    def negation(self, lit):
        return Not(lit)

    def disjunction(self, *lits):
        return Or(lits)

    def distinct(self, term1, term2):
        return Distinct(term1, term2)

    def function(self, name, *args):
        return Function(name, args)

    def variable(self, token):
        return Variable(Constant(str(token)[1:]))

    def constant(self, token):
        return Constant(str(token))


class GdlParser:
    """Compiled GDL grammar.

    Keyword options are passed through to ``lark.Lark`` (``cache``, ``debug``
    and friends); the parsing algorithm, lexer and transformer are fixed.
    An instance holds no per-parse state and can be reused freely.
    """

    def __init__(self, **options: Any) -> None:
        logger.debug("compiling GDL grammar (options=%s)", options)
        self._lark = Lark(
            GDL_GRAMMAR,
            start=list(_START_RULES),
            parser="lalr",
            lexer="basic",
            transformer=GdlTransformer(),
            **options,
        )

    def parse(self, text: str, source: Optional[str] = None) -> Description:
        """Parse a whole game description."""
        desc = self._run(text, "description", source)
        logger.debug("parsed %d clause(s) from %s", len(desc.clauses), source or "<string>")
        return desc

    def parse_sentence(self, text: str, source: Optional[str] = None) -> Sentence:
        return self._run(text, "sentence_only", source)

    def parse_literal(self, text: str, source: Optional[str] = None) -> Literal:
        return self._run(text, "literal_only", source)

    def parse_term(self, text: str, source: Optional[str] = None) -> Term:
        return self._run(text, "term_only", source)

    def _run(self, text: str, start: str, source: Optional[str]):
        if not isinstance(text, str):
            raise TypeError(f"expected GDL source text, got {type(text).__name__}")
        logger.debug("parsing %d character(s) as %s", len(text), start)
        try:
            return self._lark.parse(text, start=start)
        except UnexpectedInput as e:
            err = _syntax_error(e, text, source)
            logger.debug("parse failed: %s", err.message)
            raise err from e


@lru_cache(maxsize=None)
def default_parser() -> GdlParser:
    return GdlParser()


def parse(text: str, source: Optional[str] = None) -> Description:
    """Parse GDL source text into a Description.

    Raises ParseError at the first syntax error; no partial result is returned.
    """
    return default_parser().parse(text, source)


def parse_sentence(text: str, source: Optional[str] = None) -> Sentence:
    return default_parser().parse_sentence(text, source)


def parse_literal(text: str, source: Optional[str] = None) -> Literal:
    return default_parser().parse_literal(text, source)


def parse_term(text: str, source: Optional[str] = None) -> Term:
    return default_parser().parse_term(text, source)


def _syntax_error(e: UnexpectedInput, text: str, source: Optional[str]) -> ParseError:
    token = ""
    expected: Iterable[str] = ()
    position = e.pos_in_stream if e.pos_in_stream is not None else 0
    at_end = False

    if isinstance(e, UnexpectedToken):
        expected = e.expected
        if e.token.type == "$END":
            at_end = True
            message = "unexpected end of input"
        else:
            token = str(e.token)
            if e.token.type in _KEYWORD_TOKENS:
                message = f"reserved keyword '{token}' cannot be used here"
            else:
                message = f"unexpected token '{token}'"
    elif isinstance(e, UnexpectedCharacters):
        expected = e.allowed or ()
        token = e.char
        message = f"unexpected character '{token}'"
    elif isinstance(e, UnexpectedEOF):
        expected = e.expected
        at_end = True
        message = "unexpected end of input"
    else:
        message = str(e)

    if at_end:
        position = len(text)
    line = text.count("\n", 0, position) + 1
    column = position - (text.rfind("\n", 0, position) + 1) + 1
    return ParseError(
        message,
        position=position,
        line=line,
        column=column,
        token=token,
        expected=frozenset(_TOKEN_NAMES[name] for name in expected if name in _TOKEN_NAMES),
        snippet=_context(text, position),
        source=source,
    )


def _context(text: str, position: int, width: int = 40) -> str:
    start = max(position - width, 0)
    before = text[start:position].rsplit("\n", 1)[-1]
    after = text[position:position + width].split("\n", 1)[0]
    return f"{before}{after}\n{' ' * len(before.expandtabs())}^\n"
