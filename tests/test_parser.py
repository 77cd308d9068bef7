import pytest

from pygdl import (
    Constant,
    Description,
    Distinct,
    Function,
    GdlParser,
    Not,
    ParseError,
    Proposition,
    Relation,
    Rule,
    Variable,
    const,
    distinct,
    func,
    not_,
    or_,
    parse,
    parse_literal,
    parse_sentence,
    parse_term,
    prop,
    rel,
    rule,
    var,
)


def test_parse_relation_fact():
    d = parse("(p a b)")
    assert d == Description(clauses=(
        Relation(name=Constant("p"), args=(Constant("a"), Constant("b"))),
    ))


def test_parse_proposition_fact():
    d = parse("p")
    assert d.clauses == (Proposition(Constant("p")),)


def test_parse_rule_with_negation():
    d = parse("(<= (p ?x) (q ?x) (not (r ?x)))")
    (r,) = d.clauses
    assert isinstance(r, Rule)
    assert r.head == Relation(Constant("p"), (Variable(Constant("x")),))
    assert r.body == (
        Relation(Constant("q"), (Variable(Constant("x")),)),
        Not(Relation(Constant("r"), (Variable(Constant("x")),))),
    )


def test_parse_distinct_in_rule_body():
    (r,) = parse("(<= (p ?x ?y) (q ?x ?y) (distinct ?x ?y))").clauses
    assert r.body[1] == Distinct(term1=Variable(Constant("x")), term2=Variable(Constant("y")))


def test_comment_lines_are_whitespace():
    assert parse("; comment\n(p a)") == parse("(p a)")
    assert parse("(p a) ; trailing\n;; another\n") == parse("(p a)")
    assert parse("(p a;inline\n b)") == parse("(p a b)")


def test_whitespace_and_layout_do_not_matter():
    assert parse("( p\ta\n  ( f ?x ) )") == parse("(p a (f ?x))")


def test_empty_input_is_an_empty_description():
    assert parse("") == Description()
    assert parse("  ; nothing here\n") == Description()


def test_clause_order_is_preserved():
    d = parse("c (b 1) a (<= z y)")
    assert d.clauses == (prop("c"), rel("b", "1"), prop("a"), rule(prop("z"), prop("y")))


def test_nested_terms_and_literals():
    (r,) = parse("(<= (p (f (g ?x) a)) (or (not (q ?x)) (or r (distinct ?x (h b)))))").clauses
    assert r.head == rel("p", func("f", func("g", "?x"), "a"))
    assert r.body == (
        or_(
            not_(rel("q", "?x")),
            or_(prop("r"), distinct("?x", func("h", "b"))),
        ),
    )


def test_propositions_in_rule_positions():
    (r,) = parse("(<= terminal open (not done))").clauses
    assert r.head == prop("terminal")
    assert r.body == (prop("open"), not_(prop("done")))


def test_keywords_are_exact_and_case_sensitive():
    d = parse("(p nothing order distinctly Not OR notx)")
    (fact,) = d.clauses
    assert [a.name for a in fact.args] == ["nothing", "order", "distinctly", "Not", "OR", "notx"]


def test_numbers_and_symbols_are_constants():
    (fact,) = parse("(goal xplayer 100)").clauses
    assert fact.args == (const("xplayer"), const("100"))
    (r,) = parse("(<= (+ ?x ?y) (< ?x ?y))").clauses
    assert r.head == rel("+", "?x", "?y")


@pytest.mark.parametrize("text", [
    "(p",
    "(p a",
    "(p))",
    ")",
    "()",
    "(p)",
    "(p (f))",
    "(<= p)",
    "(<= (p ?x))",
    "(<= ?x q)",
    "(not p)",
    "(distinct a b)",
    "(or a b)",
    "(<= p (distinct a))",
    "(<= p (distinct a b c))",
    "(<= p (not))",
    "(<= p (not a b))",
    "(<= p (or))",
    "(p not)",
    "(p (or a))",
    "(<= (<= p q) r)",
    "(?x a)",
    "?x",
    "(p ?)",
    "(p ??x)",
    "((p) a)",
    "(p ?not)",
    "(p ?or)",
    "(<= (p ?<=) q)",
    "(<= p (distinct ?distinct a))",
])
def test_malformed_input_raises_parse_error(text):
    with pytest.raises(ParseError):
        parse(text)


def test_unbalanced_parenthesis_reports_end_of_input():
    with pytest.raises(ParseError) as info:
        parse("(p")
    err = info.value
    assert err.message == "unexpected end of input"
    assert err.position == 2
    assert (err.line, err.column) == (1, 3)
    assert err.token == ""
    assert "')'" not in err.expected
    assert "variable" in err.expected and "constant" in err.expected


def test_error_location_points_at_offending_token():
    text = "(role x)\n(init (cell ))"
    with pytest.raises(ParseError) as info:
        parse(text)
    err = info.value
    assert err.token == ")"
    assert err.line == 2
    assert err.column == 13
    assert text[err.position] == ")"
    assert err.span.start == err.position and err.span.end == err.position + 1


def test_keyword_misuse_is_reported():
    with pytest.raises(ParseError) as info:
        parse("(p not)")
    assert info.value.message == "reserved keyword 'not' cannot be used here"
    assert info.value.position == 3


def test_unexpected_character_is_reported():
    with pytest.raises(ParseError) as info:
        parse("(p ?)")
    assert info.value.token == "?"
    assert info.value.position == 3


def test_parse_error_message_includes_diagnostic_and_snippet():
    with pytest.raises(ParseError) as info:
        parse("(p a)\n(q ))", source="game.gdl")
    text = str(info.value)
    assert text.startswith("ERROR: E001 at game.gdl:2:4: unexpected token ')'")
    assert "note: expected one of:" in text
    assert "(q ))" in text
    assert text.rstrip().endswith("^")
    diag = info.value.to_diagnostic()
    assert diag.code == "E001"
    assert diag.span.source == "game.gdl"
    assert "')'" not in diag.expected and "constant" in diag.expected
    assert diag.snippet.splitlines()[0] == "(q ))"


def test_parse_error_is_chained_to_lark_error():
    from lark.exceptions import UnexpectedInput

    with pytest.raises(ParseError) as info:
        parse("(p")
    assert isinstance(info.value.__cause__, UnexpectedInput)


def test_parse_rejects_non_text():
    with pytest.raises(TypeError):
        parse(b"(p a)")


def test_parse_fragments():
    assert parse_term("?x") == var("x")
    assert parse_term("a") == const("a")
    assert parse_term("(f a ?y)") == func("f", "a", "?y")
    assert parse_sentence("open") == prop("open")
    assert parse_sentence("(cell 1 1 b)") == rel("cell", "1", "1", "b")
    assert parse_literal("(distinct ?x b)") == distinct("?x", "b")
    assert parse_literal("(not (true open))") == not_(rel("true", "open"))
    with pytest.raises(ParseError):
        parse_term("(f)")
    with pytest.raises(ParseError):
        parse_sentence("(distinct a b)")
    with pytest.raises(ParseError):
        parse_literal("?x")
    with pytest.raises(ParseError):
        parse_term("a b")


def test_parser_instances_are_reusable_and_deterministic(tictactoe):
    parser = GdlParser()
    first = parser.parse(tictactoe)
    second = parser.parse(tictactoe)
    assert first == second
    assert first == parse(tictactoe)


def test_parse_full_game(tictactoe):
    d = parse(tictactoe)
    assert len(d.clauses) == 17
    assert len(d.facts) == 7
    assert len(d.rules) == 10
    assert d.clauses[0] == rel("role", "xplayer")
    assert d.clauses[6] == rel("init", func("control", "xplayer"))

    blank = d.rules[2]
    assert blank.head == rel("next", func("cell", "?m", "?n", "b"))
    assert blank.body[-1] == or_(distinct("?m", "?j"), distinct("?n", "?k"))

    assert d.rules[-1] == rule(prop("terminal"), not_(prop("open")))


def test_deep_nesting_parses():
    depth = 2000
    text = "(p " + "(f " * depth + "a" + ")" * depth + ")"
    (fact,) = parse(text).clauses
    t = fact.args[0]
    for _ in range(depth):
        assert isinstance(t, Function)
        t = t.args[0]
    assert t == const("a")


def test_keyword_spelled_variables_are_syntax_errors():
    with pytest.raises(ParseError) as info:
        parse("(p ?not)")
    assert info.value.token == "?"
    assert info.value.position == 3
    # keywords only match whole tokens
    (fact,) = parse("(p ?nothing ?order ?distinctly ?<=>)").clauses
    assert [v.name.name for v in fact.args] == ["nothing", "order", "distinctly", "<=>"]
