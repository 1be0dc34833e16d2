'''
Integer RPN calculator.

Plain old integer arithmetic: + - * / %, on whitespace separated words, one
line at a time. Not intended to be anything more!

Division and remainder truncate toward zero, like C and unlike Python's //,
so -7 2 / is -3 and -7 2 % is -1.
'''

# Before the imports: the CLI reports it.
__version__ = '1.0.0'

from .cli import CLI
from .lexer import Lexer, Number, Operator
from .machine import Machine
from .util import (RPNError, EvalError,
                   InvalidSyntax, InvalidToken, DivisionByZero)


__all__ = ('Machine', 'Lexer', 'CLI', 'Number', 'Operator',
           'RPNError', 'EvalError',
           'InvalidSyntax', 'InvalidToken', 'DivisionByZero')
