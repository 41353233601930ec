from os import path
import sys
from functools import partial
from argparse import ArgumentParser, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .config import Config, DEFAULT_MAX_DENOMINATOR, EXPONENT_FORMATS
from .display import RENDERERS
from .lexer import Kind
from .machine import Machine
from .util import RPNError


logger = logging.getLogger(__name__)

_LOGGING_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


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
    Command line interface to the hybrid rational RPN calculator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.hrpn_history'
    # Read programs from stdin, one per line
    STDIN = '-'

    def dumper(self):
        '''
        Dump all tokens, their kind, and arity.
        '''
        machine = Machine(self.config)
        print('<kind>\t<repr(text)>\t<arity>')
        for line in self._programs():
            for token in machine.lexer.lex(line):
                if token.kind is Kind.OPERATOR:
                    arity = Machine.OPERATORS[token.text].arity
                elif token.kind is Kind.IDENTIFIER and \
                        token.text in Machine.FUNCTIONS:
                    arity = Machine.FUNCTIONS[token.text].arity
                else:
                    arity = None
                print(token.kind.value, repr(token.text), arity, sep='\t')
        return 0

    def executor(self):
        '''
        Run machine (RPN calculator).

        Interactively, an error aborts the rest of its line only. Otherwise
        it aborts the run, without printing the stack.
        '''
        machine = Machine(self.config)
        if self.args.prompt is not None:
            history = FileHistory(path.expanduser(self.HISTORY_FILE))
            for line in InteractiveInput(self.args.prompt, history):
                try:
                    machine.evaluate(line)
                except RPNError as e:
                    self._report(e)
                self.printstack(machine)
            return 0
        for line in self._programs():
            try:
                machine.evaluate(line)
            except RPNError as e:
                self._report(e)
                return e.exit_code
        self.printstack(machine)
        return 0

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Machine(self.config).lexer.TOKEN)
        return 0

    def printstack(self, machine):
        '''
        Print all values on the stack, bottom of the stack first.
        '''
        render = partial(RENDERERS[self.args.output], config=self.config)
        for z in machine.stack:
            print(render(z))

    def _report(self, e):
        print(e.args[0], file=sys.stderr)
        logger.debug('Traceback', exc_info=e)

    def _programs(self):
        '''
        Yield each program: -e ones, then positional ones, stdin for -.
        '''
        for program in self.args.expressions + self.args.programs:
            if program == self.STDIN:
                yield from sys.stdin
            else:
                yield program

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='RPN calculator over hybrid rational numbers')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='count', default=0)
        self.argument_parser.add_argument('-e', '--expression',
                                          action='append',
                                          dest='expressions',
                                          metavar='PROGRAM')
        self.argument_parser.add_argument('-p', '--prompt',
                                          nargs=OPTIONAL,
                                          const=self.DEFAULT_PROMPT)
        output_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, output in [('-r', '--raw', 'raw'),
                                      ('-d', '--double', 'double')]:
            output_groups.add_argument(short_, long_,
                                       action='store_const',
                                       const=output,
                                       dest='output')
        self.argument_parser.add_argument('-m', '--max-denominator',
                                          type=int,
                                          default=DEFAULT_MAX_DENOMINATOR)
        self.argument_parser.add_argument('--abs-tol', type=float)
        self.argument_parser.add_argument('--rel-tol', type=float)
        self.argument_parser.add_argument('-E', '--exponent-format',
                                          choices=sorted(EXPONENT_FORMATS),
                                          default='pow')
        self.argument_parser.add_argument('-z', '--zero-fill',
                                          action='store_true',
                                          help='popping an empty stack '
                                               'yields zero')
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.add_argument('programs', nargs='*',
                                          metavar='PROGRAM')
        self.argument_parser.set_defaults(action=self.executor,
                                          output='human',
                                          expressions=[])

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        Returns the exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(format='%(message)s',
                            level=_LOGGING_LEVELS[min(self.args.verbose, 2)])
        try:
            self.config = Config(max_denominator=self.args.max_denominator,
                                 exponent_format=EXPONENT_FORMATS[
                                     self.args.exponent_format],
                                 abs_tol=self.args.abs_tol,
                                 rel_tol=self.args.rel_tol,
                                 zero_fill=self.args.zero_fill)
        except RPNError as e:
            self.argument_parser.error(e.args[0])
        if self.args.action == self.executor and \
           self.args.prompt is None and \
           not (self.args.expressions or self.args.programs):
            self.argument_parser.error('no program given')
        try:
            return self.args.action()
        except KeyboardInterrupt:
            return 1


def main():
    sys.exit(CLI().run())
