from collections import namedtuple
from enum import Enum
from functools import reduce
import operator

import regex

from .util import LexError, MalformedLiteral


class Kind(Enum):
    '''
    Kinds of token. The values are the names of the lexer's regex groups.
    '''
    RATIONAL = 'rational'
    FLOAT = 'float'
    INTEGER = 'integer'
    OPERATOR = 'operator'
    IDENTIFIER = 'identifier'


# groups holds the non-empty named subgroups, e.g. the rational's fields.
Token = namedtuple('Token', ['kind', 'text', 'groups'])


class Lexer:
    '''
    Lexer for the RPN *regular* grammar.

    Tokens are whitespace separated; each is classified by matching it as a
    whole, never by its length.

    :param operators: Operator symbols the lexer recognizes.
    '''
    # A rational a;n;d;e. At least one semicolon, every field after the
    # first optional, empty fields take their defaults.
    RATIONAL = r'''
                (?<whole>[+-]?\d+)
                ;
                (?<numerator>(?:[+-]?\d+)?)
                (?:
                    ;
                    (?<denominator>(?:[+-]?\d+)?)
                    (?:
                        ;
                        (?<exponent>(?:[+-]?\d+)?)
                    )?
                )?
                '''
    # Needs a decimal point or an exponent, or it is an integer.
    FLOAT = r'''
             [+-]?
             (?:
                 # 1.5, 1. or .5, optionally with an exponent
                 (?:
                     \d+\.\d*
                     |
                     \.\d+
                 )
                 (?:
                     [eE][+-]?\d+
                 )?
                 |
                 # 1e5
                 \d+[eE][+-]?\d+
             )
             '''
    INTEGER = r'''
               [+-]?
               (?:
                   0[xX][0-9a-fA-F]+
                   |
                   0[oO][0-7]+
                   |
                   0[bB][01]+
                   |
                   \d+
               )
               '''
    # Function names, of any length
    IDENTIFIER = r'[A-Za-z_][A-Za-z0-9_]*'
    # Whatever starts like this but doesn't match is a broken literal, not an
    # unknown word.
    NUMERIC = r'[+-]?\.?\d|.*;'

    # Default regex flags for matching tokens
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def __init__(self, operators):
        cls = type(self)
        # Longest first, so ** isn't read as *
        self.operators = sorted(operators, key=len, reverse=True)
        self.OPERATOR = r'(?:' + r'|'.join(map(regex.escape,
                                               self.operators)) + r')'
        self.TOKEN = r'(?<rational>' + cls.RATIONAL + r')|' \
                     r'(?<float>' + cls.FLOAT + r')|' \
                     r'(?<integer>' + cls.INTEGER + r')|' \
                     r'(?<operator>' + self.OPERATOR + r')|' \
                     r'(?<identifier>' + cls.IDENTIFIER + r')'
        self._token = regex.compile(self.TOKEN, flags=cls.FLAGS)
        self._numeric = regex.compile(cls.NUMERIC, flags=cls.FLAGS)

    def lex(self, program):
        '''
        Take a program and yield its tokens.

        Everything from the first # on is a comment. Stops with a LexError on
        the first bad token.
        '''
        program = program.partition('#')[0]
        for text in program.split():
            yield self.classify(text)

    def classify(self, text):
        '''
        Return the Token for a single whitespace-free word.
        '''
        match = self._token.fullmatch(text)
        if match is None:
            if self._numeric.match(text):
                raise MalformedLiteral('Malformed literal {}'.format(
                    repr(text)))
            raise LexError("Couldn't lex '{}'".format(text))
        groups = self.matchedgroups(match)
        for kind in Kind:
            if kind.value in groups:
                return Token(kind, text, groups)
        raise LexError("Couldn't lex '{}'".format(text))

    def matchedgroups(self, match):
        '''
        Return the named groups that matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
