"""Abstract syntax tree.

Each kind of node is a distinct class: `Num` is a leaf holding an integer,
the four operator classes hold exactly two children and no value.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Num:
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class BinOp:
    left: object
    right: object

    symbol = None

    def __str__(self):
        return f"({self.symbol} {self.left} {self.right})"


class Add(BinOp):
    symbol = "+"


class Sub(BinOp):
    symbol = "-"


class Mul(BinOp):
    symbol = "*"


class Div(BinOp):
    symbol = "/"
