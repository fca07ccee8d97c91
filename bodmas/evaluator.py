import logging
import operator

from .config import EVALUATOR_CONFIG
from .errors import EvaluationError, EvaluationErrorKind
from .nodes import Add, Div, Mul, Num, Sub

logger = logging.getLogger(__name__)


class ValueStack:
    """Bounded stack of integers used while evaluating one tree."""

    def __init__(self, capacity=EVALUATOR_CONFIG["stack_capacity"]):
        self.capacity = capacity
        self.items = []

    def __len__(self):
        return len(self.items)

    def is_full(self):
        return len(self.items) >= self.capacity

    def push(self, value):
        if self.is_full():
            # expression is too nested
            raise EvaluationError(EvaluationErrorKind.STACK_OVERFLOW)
        self.items.append(value)

    def pop(self):
        if not self.items:
            raise EvaluationError(EvaluationErrorKind.STACK_UNDERFLOW)
        return self.items.pop()

    def clear(self):
        self.items.clear()


def divide(left, right):
    """ integer division truncating toward zero """
    if right == 0:
        raise EvaluationError(EvaluationErrorKind.DIVISION_BY_ZERO)
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


OPERATIONS = {
    Add: operator.add,
    Sub: operator.sub,
    Mul: operator.mul,
    Div: divide,
}


# --- evaluation (AST walker) ---
class Evaluator:
    def __init__(self, capacity=EVALUATOR_CONFIG["stack_capacity"]):
        self.stack = ValueStack(capacity)

    def evaluate(self, tree):
        """Walk `tree` depth first, children before parent, and return its value.

        The value stack is emptied before and after every run, whatever the
        outcome. A missing tree (a bare end of input) has no value.
        """
        if tree is None:
            return None
        self.stack.clear()
        try:
            self.visit(tree)
            result = self.stack.pop()
        finally:
            self.stack.clear()
        logger.debug("result: %d", result)
        return result

    def visit(self, tree):
        pending = [(tree, False)]
        while pending:
            node, children_done = pending.pop()
            if isinstance(node, Num):
                self.stack.push(node.value)
            elif children_done:
                self.apply(node)
            else:
                # popped in reverse: left subtree first, then right, then node
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))

    def apply(self, node):
        right = self.stack.pop()
        left = self.stack.pop()
        self.stack.push(OPERATIONS[type(node)](left, right))


def evaluate(tree, capacity=EVALUATOR_CONFIG["stack_capacity"]):
    return Evaluator(capacity).evaluate(tree)
