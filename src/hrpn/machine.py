from collections import namedtuple
import logging
import math

from .approx import Approximator, exact
from .config import Config
from .lexer import Kind, Lexer
from .number import HybridNumber, ONE, ZERO, add, diff, inverse, negate, \
    power, prod, reduce
from .stack import Stack
from .util import DomainError, MalformedLiteral, UnknownFunction, \
    wrap_user_errors


logger = logging.getLogger(__name__)


# evaluate is called with the machine, then the operands in push order.
Operation = namedtuple('Operation', ['name', 'arity', 'evaluate'])


def _compare(name, relation):
    '''
    Comparison of two values, pushing ONE if it holds and ZERO otherwise.
    '''
    def evaluate(machine, left, right):
        return ONE if relation(float(left), float(right)) else ZERO
    return Operation(name, 2, evaluate)


def _real(f):
    '''
    Unary float function, its result approximated anew.
    '''
    @wrap_user_errors('Math error in ' + f.__name__, DomainError)
    def evaluate(machine, only):
        return machine.approximate(f(float(only)))
    return Operation(f.__name__, 1, evaluate)


class Machine:
    '''
    Arithmetic stack machine (RPN calculator) over hybrid rational numbers.

    Takes tokens and runs them: literals are pushed, operators and functions
    pop their operands (the topmost is the right operand) and push their
    result.

    :param config: Config; defaults to Config().
    '''

    def __init__(self, config=None):
        self.config = config or Config()
        self.approximate = Approximator(self.config)
        self.stack = Stack(zero_fill=self.config.zero_fill)
        self.lexer = Lexer(type(self).OPERATORS)

    def evaluate(self, program):
        '''
        Run a whole program and return the stack, bottom first.
        '''
        for token in self.lexer.lex(program):
            self.feed(token)
        return list(self.stack)

    def feed(self, token):
        '''
        Push or run a single token.
        '''
        if token.kind is Kind.OPERATOR:
            self._apply(type(self).OPERATORS[token.text])
        elif token.kind is Kind.IDENTIFIER:
            operation = type(self).FUNCTIONS.get(token.text)
            if operation is None:
                raise UnknownFunction('Unknown function {}'.format(
                    repr(token.text)))
            self._apply(operation)
        else:
            self.stack.push(self.parse(token))
        logger.debug('%s\t-> %d element(s) on stack',
                     token.text, len(self.stack))

    @wrap_user_errors('Malformed literal {1.text!r}', MalformedLiteral)
    def parse(self, token):
        '''
        Convert a literal token into a number.
        '''
        if token.kind is Kind.RATIONAL:
            return self._rational(token.groups)
        elif token.kind is Kind.FLOAT:
            return self.approximate(float(token.text))
        elif token.kind is Kind.INTEGER:
            try:
                return exact(int(token.text, 10))
            except ValueError:
                # 0x, 0o, 0b prefixed
                return exact(int(token.text, 0))
        raise ValueError('Not a literal: {}'.format(token))

    def _rational(self, groups):
        '''
        Build a number from the fields of an a;n;d;e literal.

        The numerator takes the sign of the whole part, a negative
        denominator's sign moves to the numerator.
        '''
        sign = -1 if groups['whole'].startswith('-') else 1
        denominator = int(groups.get('denominator', 1))
        if denominator == 0:
            raise MalformedLiteral('Zero denominator in {}'.format(
                repr(groups['rational'])))
        return reduce(HybridNumber(int(groups['whole']),
                                   sign * int(groups.get('numerator', 0)),
                                   denominator,
                                   int(groups.get('exponent', 0)),
                                   0.0))

    def _apply(self, operation):
        '''
        Apply operation to the stack, popping arguments as needed.
        '''
        # If you don't reverse, you'll do 3/6 when you say 6 3 /
        args = reversed(self.stack.pop(operation.arity))
        self.stack.push(operation.evaluate(self, *args))

    def inverse(self, z):
        return inverse(z, self.approximate)

    @wrap_user_errors('Math error in +', DomainError)
    def plus(self, left, right):
        return add(left, right)

    def minus(self, only):
        return negate(only)

    @wrap_user_errors('Math error in *', DomainError)
    def times(self, left, right):
        return prod(left, right)

    @wrap_user_errors('Math error in /', DomainError)
    def divide(self, left, right):
        return prod(left, self.inverse(right))

    @wrap_user_errors('Math error in \\', DomainError)
    def rdivide(self, left, right):
        '''
        Reverse division: the top of the stack divided by the one below.
        '''
        return prod(self.inverse(left), right)

    def invert(self, only):
        return self.inverse(only)

    @wrap_user_errors('Math error in ^', DomainError)
    def real_power(self, left, right):
        return self.approximate(math.pow(float(left), float(right)))

    @wrap_user_errors('Math error in **', DomainError)
    def integer_power(self, left, right):
        '''
        left to the power of right, rounded to an integer.
        '''
        return self.approximate(power(float(left), round(float(right))))

    @wrap_user_errors('Math error in diff', DomainError)
    def absdiff(self, left, right):
        return diff(left, right)

    OPERATORS = {
        '+': Operation('+', 2, plus),
        '-': Operation('-', 1, minus),
        '*': Operation('*', 2, times),
        '/': Operation('/', 2, divide),
        '\\': Operation('\\', 2, rdivide),
        '@': Operation('@', 1, invert),
        '^': Operation('^', 2, real_power),
        '**': Operation('**', 2, integer_power),
        '<': _compare('<', lambda a, b: a < b),
        '>': _compare('>', lambda a, b: a > b),
        '=': _compare('=', lambda a, b: a == b),
        '<=': _compare('<=', lambda a, b: a <= b),
        '>=': _compare('>=', lambda a, b: a >= b),
        '==': _compare('==', lambda a, b: a == b),
    }

    FUNCTIONS = {
        operation.name: operation
        for operation
        in map(_real, [math.exp, math.log, math.log10, math.log2,
                       math.sin, math.cos, math.tan,
                       math.sinh, math.cosh, math.tanh])
    }
    FUNCTIONS['diff'] = Operation('diff', 2, absdiff)
