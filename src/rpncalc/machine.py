from collections import deque
import operator

from .util import InvalidSyntax, DivisionByZero
from .lexer import Lexer, Number, Operator


def _truncdiv(left, right):
    '''
    Integer division, rounding toward zero rather than Python's floor.
    '''
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _truncmod(left, right):
    '''
    Remainder of _truncdiv; takes the sign of the dividend.
    '''
    return left - right * _truncdiv(left, right)


class Machine:
    '''
    Integer stack machine (RPN evaluator).

    Evaluates one line at a time. Every line gets a fresh stack, so nothing
    carries over from one evaluation to the next, failed or not.
    '''

    # Arithmetic operators, by operator. Left operand first.
    BUILTINS = {
        Operator.ADD: operator.__add__,
        Operator.SUB: operator.__sub__,
        Operator.MUL: operator.__mul__,
        Operator.DIV: _truncdiv,
        Operator.MOD: _truncmod,
    }
    assert BUILTINS.keys() == set(Operator)

    # Operators whose right operand must not be zero.
    DIVISIONS = frozenset({Operator.DIV, Operator.MOD})

    def __init__(self, verbose=False, trace=None):
        '''
        Create stack machine.

        :param verbose: Print remaining words and stack after each word.
        :param trace: Where to print to when verbose. Defaults to stdout.
        '''
        self.verbose = verbose
        self.trace = trace
        self.lexer = Lexer()

    def evaluate(self, line):
        '''
        Evaluate line, returning the single value it reduces to.

        Raises an EvalError on the first bad word, or if the line doesn't
        reduce to exactly one value.
        '''
        words = self.lexer.split(line)
        stack = deque()
        for position, text in enumerate(words, 1):
            token = self.lexer.classify(text, position)
            if isinstance(token, Number):
                stack.append(token.value)
            else:
                stack.append(self._apply(stack, token, position))
            if self.verbose:
                print(words[position:], list(stack), file=self.trace)
        if len(stack) != 1:
            raise InvalidSyntax(len(words))
        return stack[0]

    def _apply(self, stack, operator, position):
        '''
        Pop operands for operator off stack, and return the result.
        '''
        # Topmost is the right operand: 2 3 - is 2 - 3, not 3 - 2.
        right = self._popstack(stack, position)
        left = self._popstack(stack, position)
        if operator in type(self).DIVISIONS and right == 0:
            raise DivisionByZero(position)
        return type(self).BUILTINS[operator](left, right)

    def _popstack(self, stack, position):
        if not stack:
            raise InvalidSyntax(position)
        return stack.pop()
