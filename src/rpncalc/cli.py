from os import path
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from . import __version__
from .util import RPNError
from .machine import Machine
from .lexer import Lexer


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # Persistent
                                    history=self.history,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to RPN calculator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.rpncalc_history'

    def dumper(self):
        '''
        Dump all tokens, their kind, and arity.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(word)>\t<arity>')
        for line in self.args.expressions:
            try:
                for _, text, token in lexer.lex(line):
                    kind = 'operator' if lexer.arity(token) else 'number'
                    print(kind, repr(text), lexer.arity(token), sep='\t')
            except RPNError as e:
                print(e.args[0], file=sys.stderr)

    def executor(self):
        '''
        Evaluate every line, printing its value, or why it has none.
        '''
        machine = Machine(verbose=self.args.verbose)
        for line in self.args.expressions:
            try:
                print(machine.evaluate(line))
            # One bad line doesn't stop the rest.
            except RPNError as e:
                print(e.args[0], file=sys.stderr)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.TOKEN)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            history = FileHistory(path.expanduser(self.HISTORY_FILE))
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=history)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('--version', action='version',
                                          version='%(prog)s ' + __version__)
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='print remaining words and '
                                               'stack after each word')
        self.argument_parser.add_argument('file', metavar='FILE',
                                          nargs=OPTIONAL,
                                          help='read lines from FILE '
                                               'instead of stdin')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.file is None:
            if self.args.expressions is None:
                self.args.expressions = self._prompting_input()
            return self._run_action()
        # Check before opening, so a usage error leaves nothing open.
        if self.args.expressions is not None or \
           self.args.prompt is not None:
            self.argument_parser.error('FILE not allowed with '
                                       '-e/--expression or -p/--prompt')
        try:
            fp = open(self.args.file)
        except OSError as e:
            self.argument_parser.error("can't open '{}': {}"
                                       .format(self.args.file, e.strerror))
        with fp:
            self.args.expressions = fp
            self._run_action()

    def _run_action(self):
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
