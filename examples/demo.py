import sys, os

# Adjust python path to include src
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from pygdl import Constant, ParseError, Variable, Visitor, parse, render_description, traverse

GAME = """
; a two-cell toy game
(role robot)
(init (cell a off))
(init (cell b off))
(<= (legal robot (press ?c)) (true (cell ?c off)))
(<= (next (cell ?c on)) (does robot (press ?c)))
(<= (next (cell ?c ?s)) (true (cell ?c ?s)) (not (does robot (press ?c))))
(<= terminal (true (cell a on)) (true (cell b on)))
"""


class Standardize(Visitor):
    """Renames each rule's variables to ?v0, ?v1, ... in order of appearance."""

    def __init__(self):
        self.names = {}

    def visit_variable(self, node):
        new = self.names.setdefault(node.name.name, f"v{len(self.names)}")
        return Variable(Constant(new))

    def visit_rule(self, node):
        self.names = {}


def main():
    desc = parse(GAME)

    print("--- Game Description ---")
    print(render_description(desc, separator="\n"))

    print("\n--- Standardized Variables ---")
    print(render_description(traverse(desc, Standardize()), separator="\n"))

    print("\n--- Syntax Error ---")
    try:
        parse("(<= (legal robot (press ?c))")
    except ParseError as e:
        print(e)


if __name__ == "__main__":
    main()
