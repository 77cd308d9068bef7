from __future__ import annotations

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


def render(node: Node) -> str:
    """Canonical GDL text for any node; ``parse`` reads it back unchanged."""
    match node:
        case Description():
            return render_description(node)
        case Rule():
            return render_rule(node)
        case Not() | Or() | Distinct() | Proposition() | Relation():
            return render_literal(node)
        case Variable() | Function() | Constant():
            return render_term(node)
    raise TypeError(f"cannot render {type(node).__name__}")


def render_description(d: Description, separator: str = " ") -> str:
    return separator.join(render_clause(c) for c in d.clauses)


def render_clause(c: Clause) -> str:
    if isinstance(c, Rule):
        return render_rule(c)
    return render_sentence(c)


def render_rule(r: Rule) -> str:
    body = " ".join(render_literal(lit) for lit in r.body)
    return f"(<= {render_sentence(r.head)} {body})"


def render_sentence(s: Sentence) -> str:
    match s:
        case Proposition(name=name):
            return name.name
        case Relation(name=name, args=args):
            return _compound(name, args)


def render_literal(lit: Literal) -> str:
    match lit:
        case Not(lit=inner):
            return f"(not {render_literal(inner)})"
        case Or(lits=lits):
            return "(or " + " ".join(render_literal(x) for x in lits) + ")"
        case Distinct(term1=t1, term2=t2):
            return f"(distinct {render_term(t1)} {render_term(t2)})"
        case Proposition() | Relation():
            return render_sentence(lit)


def render_term(t: Term) -> str:
    match t:
        case Variable(name=name):
            return "?" + name.name
        case Function(name=name, args=args):
            return _compound(name, args)
        case Constant(name=name):
            return name


def _compound(name: Constant, args) -> str:
    return "(" + " ".join([name.name, *(render_term(a) for a in args)]) + ")"
