from functools import reduce
from typing import NamedTuple
from enum import Enum
import operator

import regex

from .util import InvalidToken


class Number(NamedTuple):
    '''
    Integer literal, to be pushed as is.
    '''
    value: int


class Operator(Enum):
    '''
    Binary arithmetic operators, by their spelling.
    '''
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    MOD = '%'


class Lexer:
    '''
    Lexer for the RPN *regular* grammar.

    Words are whitespace separated; each is either a Number or an Operator.
    Holds no internal state.
    '''
    # Base 10 only, ASCII digits only. No thousands separators: 1_000 is not a
    # number, and thus an invalid token.
    NUMBER = r'''
              [-+]?
              [0-9]+
              '''

    assert not [operator
                for operator
                in Operator
                if len(operator.value) != 1]
    OPERATOR = r'(?:' + r'|'.join(regex.escape(operator.value)
                                  for operator
                                  in Operator) + r')'
    WORD = r'\S+'

    # A whole word, classified by the group it matches.
    TOKEN = r'(?<number>' + NUMBER + r')|' \
            r'(?<operator>' + OPERATOR + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def split(self, line):
        '''
        Return all words of line, in order.
        '''
        return regex.findall(type(self).WORD, line, flags=type(self).FLAGS)

    def classify(self, text, position):
        '''
        Turn a word into a Number or an Operator.

        :param position: 1-based position of the word, for error reporting.
        '''
        match = regex.fullmatch(type(self).TOKEN, text,
                                flags=type(self).FLAGS)
        if match is None:
            raise InvalidToken(position, text)
        elif match.group('number') is not None:
            return Number(int(match.group('number')))
        else:
            return Operator(match.group('operator'))

    def lex(self, line):
        '''
        Yield (position, word, token) for every word of line.

        Classifies lazily, so a bad word only raises once reached.
        '''
        for position, text in enumerate(self.split(line), 1):
            yield position, text, self.classify(text, position)

    def arity(self, token):
        '''
        Return the number of operands token pops.
        '''
        return 2 if isinstance(token, Operator) else 0
