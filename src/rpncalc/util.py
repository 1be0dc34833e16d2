class RPNError(Exception):
    pass


class EvalError(RPNError):
    '''
    Error evaluating a line, at the 1-based position of the offending token.

    Position 0 means no token at all (e.g., an empty line).

    Extra fields are both formatted into FMT and kept as attributes.
    '''
    FMT = 'cannot evaluate at {position}'

    def __init__(self, position, **fields):
        super().__init__(self.FMT.format(position=position, **fields))
        self.position = position
        for name, value in fields.items():
            setattr(self, name, value)


class InvalidSyntax(EvalError):
    '''
    Stack underflow, or not exactly one value left once the line is done.
    '''
    FMT = 'invalid syntax at {position}'


class InvalidToken(EvalError):
    '''
    Word that is neither a number nor a known operator.
    '''
    FMT = 'invalid token at {position}: {token!r}'

    def __init__(self, position, token):
        super().__init__(position, token=token)


class DivisionByZero(EvalError):
    FMT = 'division by zero at {position}'
