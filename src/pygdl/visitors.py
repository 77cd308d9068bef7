from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Optional

from .nodes import (
    Clause,
    Constant,
    Description,
    Distinct,
    Function,
    Literal,
    Node,
    Not,
    Or,
    Proposition,
    Relation,
    Rule,
    Sentence,
    Term,
    Variable,
)


class Visitor:
    """Hooks called by the post-order traversal, one per node kind.

    Every hook is a no-op by default. A hook returns ``None`` to keep the
    node it was given, or a node to put in its place; the replacement is
    spliced into the parent before any of the parent's hooks fire.

    Position hooks fire after the kind hook of the node in that position:
    ``visit_clause`` for top-level clauses, ``visit_sentence`` for rule heads
    and top-level facts, ``visit_literal`` for rule body elements and the
    operands of ``not``/``or``, ``visit_term`` for arguments and the operands
    of ``distinct``. Relation and function names are constants but not terms.

    Problems found by a hook are reported through the visitor's own state;
    the traversal itself never raises.
    """

    def visit_description(self, node: Description) -> Optional[Description]:
        return None

    def visit_clause(self, node: Clause) -> Optional[Clause]:
        return None

    def visit_rule(self, node: Rule) -> Optional[Clause]:
        return None

    def visit_sentence(self, node: Sentence) -> Optional[Sentence]:
        return None

    def visit_proposition(self, node: Proposition) -> Optional[Node]:
        return None

    def visit_relation(self, node: Relation) -> Optional[Node]:
        return None

    def visit_literal(self, node: Literal) -> Optional[Literal]:
        return None

    def visit_term(self, node: Term) -> Optional[Term]:
        return None

    def visit_constant(self, node: Constant) -> Optional[Node]:
        return None

    def visit_variable(self, node: Variable) -> Optional[Term]:
        return None

    def visit_function(self, node: Function) -> Optional[Term]:
        return None

    def visit_not(self, node: Not) -> Optional[Literal]:
        return None

    def visit_or(self, node: Or) -> Optional[Literal]:
        return None

    def visit_distinct(self, node: Distinct) -> Optional[Literal]:
        return None


class CallbackVisitor(Visitor):
    """Composition-based visitor.

    - Calls `node_cb` from every node-kind hook (post-order)
    - Optionally calls `term_cb` for every node in term position

    Callback results follow the hook contract: ``None`` keeps the node.
    """

    def __init__(
        self,
        node_cb: Callable[[Node], Any],
        term_cb: Optional[Callable[[Term], Any]] = None,
    ) -> None:
        self._node_cb = node_cb
        self._term_cb = term_cb

    def _node(self, node):
        return self._node_cb(node)

    visit_description = _node
    visit_rule = _node
    visit_proposition = _node
    visit_relation = _node
    visit_constant = _node
    visit_variable = _node
    visit_function = _node
    visit_not = _node
    visit_or = _node
    visit_distinct = _node

    def visit_term(self, node: Term) -> Optional[Term]:
        if self._term_cb is not None:
            return self._term_cb(node)
        return None


def traverse(node: Node, visitor: Visitor) -> Node:
    """Walk ``node`` post-order and return it with all replacements applied."""
    match node:
        case Description():
            return traverse_description(node, visitor)
        case Rule():
            return traverse_rule(node, visitor)
        case Proposition():
            return traverse_proposition(node, visitor)
        case Relation():
            return traverse_relation(node, visitor)
        case Not():
            return traverse_not(node, visitor)
        case Or():
            return traverse_or(node, visitor)
        case Distinct():
            return traverse_distinct(node, visitor)
        case Variable():
            return traverse_variable(node, visitor)
        case Function():
            return traverse_function(node, visitor)
        case Constant():
            return traverse_constant(node, visitor)
    raise TypeError(f"cannot traverse {type(node).__name__}")


def traverse_description(desc: Description, visitor: Visitor) -> Description:
    clauses = tuple(traverse_clause(c, visitor) for c in desc.clauses)
    return _fire(visitor.visit_description, _rebuild(desc, clauses=clauses))


def traverse_clause(clause: Clause, visitor: Visitor) -> Clause:
    if isinstance(clause, Rule):
        clause = traverse_rule(clause, visitor)
    else:
        clause = traverse_sentence(clause, visitor)
    return _fire(visitor.visit_clause, clause)


def traverse_rule(r: Rule, visitor: Visitor) -> Clause:
    head = traverse_sentence(r.head, visitor)
    body = tuple(traverse_literal(lit, visitor) for lit in r.body)
    return _fire(visitor.visit_rule, _rebuild(r, head=head, body=body))


def traverse_sentence(s: Sentence, visitor: Visitor) -> Sentence:
    match s:
        case Proposition():
            s = traverse_proposition(s, visitor)
        case Relation():
            s = traverse_relation(s, visitor)
    return _fire(visitor.visit_sentence, s)


def traverse_proposition(p: Proposition, visitor: Visitor) -> Node:
    name = traverse_constant(p.name, visitor)
    return _fire(visitor.visit_proposition, _rebuild(p, name=name))


def traverse_relation(r: Relation, visitor: Visitor) -> Node:
    name = traverse_constant(r.name, visitor)
    args = tuple(traverse_term(t, visitor) for t in r.args)
    return _fire(visitor.visit_relation, _rebuild(r, name=name, args=args))


def traverse_literal(lit: Literal, visitor: Visitor) -> Literal:
    match lit:
        case Not():
            lit = traverse_not(lit, visitor)
        case Or():
            lit = traverse_or(lit, visitor)
        case Distinct():
            lit = traverse_distinct(lit, visitor)
        case Relation():
            lit = traverse_relation(lit, visitor)
        case Proposition():
            lit = traverse_proposition(lit, visitor)
    return _fire(visitor.visit_literal, lit)


def traverse_not(n: Not, visitor: Visitor) -> Literal:
    lit = traverse_literal(n.lit, visitor)
    return _fire(visitor.visit_not, _rebuild(n, lit=lit))


def traverse_or(o: Or, visitor: Visitor) -> Literal:
    lits = tuple(traverse_literal(lit, visitor) for lit in o.lits)
    return _fire(visitor.visit_or, _rebuild(o, lits=lits))


def traverse_distinct(d: Distinct, visitor: Visitor) -> Literal:
    term1 = traverse_term(d.term1, visitor)
    term2 = traverse_term(d.term2, visitor)
    return _fire(visitor.visit_distinct, _rebuild(d, term1=term1, term2=term2))


def traverse_term(t: Term, visitor: Visitor) -> Term:
    match t:
        case Constant():
            t = traverse_constant(t, visitor)
        case Function():
            t = traverse_function(t, visitor)
        case Variable():
            t = traverse_variable(t, visitor)
    return _fire(visitor.visit_term, t)


def traverse_constant(c: Constant, visitor: Visitor) -> Node:
    return _fire(visitor.visit_constant, c)


def traverse_variable(v: Variable, visitor: Visitor) -> Term:
    name = traverse_constant(v.name, visitor)
    return _fire(visitor.visit_variable, _rebuild(v, name=name))


def traverse_function(f: Function, visitor: Visitor) -> Term:
    name = traverse_constant(f.name, visitor)
    args = tuple(traverse_term(t, visitor) for t in f.args)
    return _fire(visitor.visit_function, _rebuild(f, name=name, args=args))


def _fire(hook: Callable[[Any], Any], node: Any) -> Any:
    result = hook(node)
    return node if result is None else result


def _rebuild(node: Any, **children: Any) -> Any:
    # keep the original object unless some child was actually replaced
    for attr, new in children.items():
        old = getattr(node, attr)
        if isinstance(new, tuple):
            if len(new) != len(old) or any(a is not b for a, b in zip(new, old)):
                return replace(node, **children)
        elif new is not old:
            return replace(node, **children)
    return node
