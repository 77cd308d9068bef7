from __future__ import annotations

import re
from dataclasses import dataclass, fields
from functools import total_ordering
from typing import Any, Dict, Tuple, Union

KEYWORDS = frozenset({"<=", "not", "or", "distinct"})

_RESERVED = re.compile(r"[\s();]")


@total_ordering
class _Node:
    """Total order shared by every AST node.

    Nodes compare by variant rank first and then field by field, so
    heterogeneous sequences (rule bodies, argument lists, clause lists)
    sort deterministically.
    """

    __slots__ = ()

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, _Node):
            return NotImplemented
        return sort_key(self) < sort_key(other)


@dataclass(frozen=True, slots=True)
class Constant(_Node):
    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"constant name must be a string, got {type(self.name).__name__}")
        if not self.name:
            raise ValueError("constant name must be non-empty")
        if _RESERVED.search(self.name):
            raise ValueError(f"constant name {self.name!r} contains whitespace or a reserved character")
        if self.name.startswith("?"):
            raise ValueError(f"constant name {self.name!r} must not start with '?'")
        if self.name in KEYWORDS:
            raise ValueError(f"'{self.name}' is a reserved keyword")


@dataclass(frozen=True, slots=True)
class Variable(_Node):
    # rendered as '?' + name; the sigil is not part of the name
    name: Constant

    def __post_init__(self) -> None:
        _expect(self, "name", Constant)


@dataclass(frozen=True, slots=True)
class Function(_Node):
    name: Constant
    args: Tuple[Term, ...]

    def __post_init__(self) -> None:
        _expect(self, "name", Constant)
        _expect_seq(self, "args", _TERM_TYPES, "term")

    @property
    def arity(self) -> int:
        return len(self.args)


@dataclass(frozen=True, slots=True)
class Proposition(_Node):
    name: Constant

    def __post_init__(self) -> None:
        _expect(self, "name", Constant)

    @property
    def arity(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class Relation(_Node):
    name: Constant
    args: Tuple[Term, ...]

    def __post_init__(self) -> None:
        _expect(self, "name", Constant)
        _expect_seq(self, "args", _TERM_TYPES, "term")

    @property
    def arity(self) -> int:
        return len(self.args)


@dataclass(frozen=True, slots=True)
class Not(_Node):
    lit: Literal

    def __post_init__(self) -> None:
        _expect(self, "lit", _LITERAL_TYPES)


@dataclass(frozen=True, slots=True)
class Or(_Node):
    lits: Tuple[Literal, ...]

    def __post_init__(self) -> None:
        _expect_seq(self, "lits", _LITERAL_TYPES, "literal")


@dataclass(frozen=True, slots=True)
class Distinct(_Node):
    term1: Term
    term2: Term

    def __post_init__(self) -> None:
        _expect(self, "term1", _TERM_TYPES)
        _expect(self, "term2", _TERM_TYPES)


@dataclass(frozen=True, slots=True)
class Rule(_Node):
    head: Sentence
    body: Tuple[Literal, ...]

    def __post_init__(self) -> None:
        _expect(self, "head", _SENTENCE_TYPES)
        _expect_seq(self, "body", _LITERAL_TYPES, "literal")


@dataclass(frozen=True, slots=True)
class Description(_Node):
    clauses: Tuple[Clause, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "clauses", tuple(self.clauses))
        for c in self.clauses:
            if not isinstance(c, _CLAUSE_TYPES):
                raise TypeError(f"Description clauses must be rules or sentences, got {type(c).__name__}")

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return tuple(c for c in self.clauses if isinstance(c, Rule))

    @property
    def facts(self) -> Tuple[Sentence, ...]:
        return tuple(c for c in self.clauses if not isinstance(c, Rule))


# Closed variants over the concrete node types
Term = Union[Variable, Function, Constant]
Sentence = Union[Proposition, Relation]
Literal = Union[Not, Or, Distinct, Proposition, Relation]
Clause = Union[Rule, Proposition, Relation]
Node = Union[Description, Rule, Not, Or, Distinct, Proposition, Relation, Variable, Function, Constant]

_TERM_TYPES = (Variable, Function, Constant)
_SENTENCE_TYPES = (Proposition, Relation)
_LITERAL_TYPES = (Not, Or, Distinct, Proposition, Relation)
_CLAUSE_TYPES = (Rule, Proposition, Relation)

# Consistent with every variant's declaration order:
# Rule < Sentence, Proposition < Relation, Not < Or < Distinct < Proposition < Relation,
# Variable < Function < Constant.
_RANK: Dict[type, int] = {
    Description: 0,
    Rule: 1,
    Not: 2,
    Or: 3,
    Distinct: 4,
    Proposition: 5,
    Relation: 6,
    Variable: 7,
    Function: 8,
    Constant: 9,
}


def sort_key(value: Any) -> Any:
    """Key implementing the structural order: variant rank, then fields."""
    if isinstance(value, _Node):
        return (_RANK[type(value)], tuple(sort_key(getattr(value, f.name)) for f in fields(value)))
    if isinstance(value, tuple):
        return tuple(sort_key(v) for v in value)
    return value


def _expect(node: _Node, attr: str, types) -> None:
    value = getattr(node, attr)
    if not isinstance(value, types):
        raise TypeError(f"{type(node).__name__}.{attr} has unexpected type {type(value).__name__}")


def _expect_seq(node: _Node, attr: str, types, what: str) -> None:
    items = tuple(getattr(node, attr))
    if not items:
        raise ValueError(f"{type(node).__name__}.{attr} must contain at least one {what}")
    for item in items:
        if not isinstance(item, types):
            raise TypeError(f"{type(node).__name__}.{attr} expects {what}s, got {type(item).__name__}")
    object.__setattr__(node, attr, items)


# Ergonomic factories for strict construction

def const(name: Union[str, Constant]) -> Constant:
    if isinstance(name, Constant):
        return name
    return Constant(name)


def var(name: Union[str, Constant]) -> Variable:
    if isinstance(name, str) and name.startswith("?"):
        name = name[1:]
    return Variable(const(name))


def term(value: Union[str, Term]) -> Term:
    """Bare token to Term: '?x' is a variable, anything else a constant."""
    if isinstance(value, _TERM_TYPES):
        return value
    if value.startswith("?"):
        return var(value)
    return Constant(value)


def func(name: Union[str, Constant], *args: Union[str, Term]) -> Function:
    return Function(const(name), tuple(term(a) for a in args))


def prop(name: Union[str, Constant]) -> Proposition:
    return Proposition(const(name))


def rel(name: Union[str, Constant], *args: Union[str, Term]) -> Relation:
    return Relation(const(name), tuple(term(a) for a in args))


def sentence(name: Union[str, Constant], *args: Union[str, Term]) -> Sentence:
    if args:
        return rel(name, *args)
    return prop(name)


def not_(lit: Literal) -> Not:
    return Not(lit)


def or_(*lits: Literal) -> Or:
    return Or(tuple(lits))


def distinct(term1: Union[str, Term], term2: Union[str, Term]) -> Distinct:
    return Distinct(term(term1), term(term2))


def rule(head: Sentence, *body: Literal) -> Rule:
    return Rule(head=head, body=tuple(body))


def description(*clauses: Clause) -> Description:
    return Description(clauses=tuple(clauses))
