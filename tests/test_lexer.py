'''
RPN lexer tests
'''

import regex

from hrpn.util import LexError, MalformedLiteral
from hrpn.lexer import Kind, Lexer
from hrpn.machine import Machine

from pytest import fixture, mark, raises


@fixture
def lexer():
    return Lexer(Machine.OPERATORS)


def kinds(lexer, program):
    return [token.kind for token in lexer.lex(program)]


@mark.parametrize('text, kind', [
    ('2;1;2', Kind.RATIONAL),
    ('-2;1', Kind.RATIONAL),
    ('1;;;3', Kind.RATIONAL),
    ('1.5', Kind.FLOAT),
    ('1.', Kind.FLOAT),
    ('-.5', Kind.FLOAT),
    ('1e5', Kind.FLOAT),
    ('2E-3', Kind.FLOAT),
    ('42', Kind.INTEGER),
    ('-42', Kind.INTEGER),
    ('+7', Kind.INTEGER),
    ('0x1F', Kind.INTEGER),
    ('0b101', Kind.INTEGER),
    ('-', Kind.OPERATOR),
    ('**', Kind.OPERATOR),
    ('<=', Kind.OPERATOR),
    ('\\', Kind.OPERATOR),
    ('@', Kind.OPERATOR),
    ('log10', Kind.IDENTIFIER),
    ('diff', Kind.IDENTIFIER),
])
def test_classify(lexer, text, kind):
    assert lexer.classify(text).kind is kind


def test_kind_does_not_depend_on_length(lexer):
    # Short words are names too, not operators
    assert kinds(lexer, 'x ln e') == [Kind.IDENTIFIER] * 3


def test_comment(lexer):
    assert [t.text for t in lexer.lex('3 4 + # 5 6 *')] == ['3', '4', '+']


def test_whitespace(lexer):
    assert [t.text for t in lexer.lex('\t3\n 4  +  ')] == ['3', '4', '+']


def test_rational_groups(lexer):
    groups = lexer.classify('2;1;-4;3').groups
    assert (groups['whole'], groups['numerator'],
            groups['denominator'], groups['exponent']) == ('2', '1', '-4', '3')


def test_rational_empty_fields_missing(lexer):
    groups = lexer.classify('2;;5').groups
    assert 'numerator' not in groups
    assert groups['denominator'] == '5'


def test_unknown_backslash(lexer):
    with raises(LexError, match=regex.escape(r"Couldn't lex '\f'")):
        list(lexer.lex(r"\f"))


def test_unknown_operator(lexer):
    with raises(LexError, match=regex.escape("Couldn't lex '***'")):
        list(lexer.lex('1 2 ***'))


@mark.parametrize('text', ['12abc', '1.2.3', '5e', '1;+', 'abc;', '-1x'])
def test_malformed_literal(lexer, text):
    with raises(MalformedLiteral):
        lexer.classify(text)


def test_stops_on_first_bad(lexer):
    tokens = lexer.lex('1 2 $ 3')
    assert next(tokens).text == '1'
    assert next(tokens).text == '2'
    with raises(LexError):
        next(tokens)
