GDL_GRAMMAR = r"""
    description: clause*

    // --- Fragment entry points ---
    sentence_only: sentence
    literal_only: literal
    term_only: term

    // --- Clauses ---
    ?clause: rule
           | sentence

    rule: _LPAR _IMPLIES sentence literal+ _RPAR

    ?sentence: relation
             | proposition

    relation: _LPAR constant term+ _RPAR
    proposition: constant

    // --- Rule bodies ---
    ?literal: negation
            | disjunction
            | distinct
            | relation
            | proposition

    negation: _LPAR _NOT literal _RPAR
    disjunction: _LPAR _OR literal+ _RPAR
    distinct: _LPAR _DISTINCT term term _RPAR

    // --- Terms ---
    ?term: variable
         | function
         | constant

    function: _LPAR constant term+ _RPAR
    variable: VARIABLE
    constant: NAME

    _LPAR: "("
    _RPAR: ")"

    // Keywords are exact tokens; a NAME spelled like one is retyped by the lexer
    _IMPLIES: "<="
    _NOT: "not"
    _OR: "or"
    _DISTINCT: "distinct"

    // a variable name is a constant, so keyword names are excluded
    VARIABLE: /\?(?!(?:<=|not|or|distinct)(?![^\s();]))[^\s();?][^\s();]*/
    NAME: /[^\s();?][^\s();]*/
    COMMENT: /;[^\n]*/

    %import common.WS
    %ignore WS
    %ignore COMMENT
"""
