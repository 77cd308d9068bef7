import pytest

TICTACTOE = """
;;;; Tic-tac-toe
(role xplayer)
(role oplayer)

(init (cell 1 1 b))
(init (cell 1 2 b))
(init (cell 2 1 b))
(init (cell 2 2 b))
(init (control xplayer))

(<= (next (cell ?m ?n x))
    (does xplayer (mark ?m ?n))
    (true (cell ?m ?n b)))

(<= (next (cell ?m ?n ?w))
    (true (cell ?m ?n ?w))
    (distinct ?w b))

(<= (next (cell ?m ?n b))
    (does ?w (mark ?j ?k))
    (true (cell ?m ?n b))
    (or (distinct ?m ?j) (distinct ?n ?k)))

(<= (legal ?w (mark ?x ?y))
    (true (cell ?x ?y b))
    (true (control ?w)))

(<= (row ?m ?x) (true (cell ?m 1 ?x)) (true (cell ?m 2 ?x)))
(<= (line ?x) (row ?m ?x))
(<= open (true (cell ?m ?n b)))  ; any blank cell

(<= (goal xplayer 100) (line x))
(<= terminal (line x))
(<= terminal (not open))
"""


@pytest.fixture
def tictactoe():
    return TICTACTOE
