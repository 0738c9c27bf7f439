"""Reader for arithmetic expressions, producing folds.

Accepts the output of both printers: ``(1+(-2))`` as well as ``1 + -2``.
Binary minus is read as ``a + (-b)``.
"""

from __future__ import annotations

from typing import cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from foldenc.inductive.expr import add, lit, neg
from foldenc.kernel.fold import Fold
from foldenc.common.span import Span
from foldenc.surface.errors import ParseError

_SOURCE: str = ""

tokens = (
    "INT",
    "PLUS",
    "MINUS",
    "LPAREN",
    "RPAREN",
)

t_PLUS = r"\+"
t_MINUS = r"-"
t_LPAREN = r"\("
t_RPAREN = r"\)"

t_ignore = " \t"


def t_newline(t: lex.LexToken) -> None:
    r"\n+"
    t.lexer.lineno += len(t.value)


def t_INT(t: lex.LexToken) -> lex.LexToken:
    r"\d+"
    t.end = t.lexpos + len(t.value)
    t.value = int(t.value)
    return t


def t_error(t: lex.LexToken) -> None:
    span = Span(t.lexpos, t.lexpos + 1)
    raise ParseError(f"Unexpected character {t.value[0]!r}", span, _SOURCE)


precedence = (
    ("left", "PLUS", "MINUS"),
    ("right", "UMINUS"),
)


def _tok_span(tok: lex.LexToken) -> Span:
    end = getattr(tok, "end", tok.lexpos + len(str(tok.value)))
    return Span(tok.lexpos, end)


def p_expr_add(p: yacc.YaccProduction) -> None:
    "expr : expr PLUS expr"
    p[0] = add(p[1], p[3])


def p_expr_sub(p: yacc.YaccProduction) -> None:
    "expr : expr MINUS expr"
    p[0] = add(p[1], neg(p[3]))


def p_expr_neg(p: yacc.YaccProduction) -> None:
    "expr : MINUS expr %prec UMINUS"
    p[0] = neg(p[2])


def p_expr_int(p: yacc.YaccProduction) -> None:
    "expr : INT"
    p[0] = lit(p[1])


def p_expr_paren(p: yacc.YaccProduction) -> None:
    "expr : LPAREN expr RPAREN"
    p[0] = p[2]


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        span = Span(len(_SOURCE), len(_SOURCE))
        raise ParseError("Unexpected end of input", span, _SOURCE)
    span = _tok_span(cast(lex.LexToken, p))
    raise ParseError("Unexpected token", span, _SOURCE)


_PARSER = None


def parse_expr(source: str) -> Fold:
    global _SOURCE, _PARSER
    _SOURCE = source
    lexer = lex.lex()
    if _PARSER is None:
        _PARSER = yacc.yacc(start="expr", debug=False, write_tables=False)
    expr = cast(Fold | None, _PARSER.parse(source, lexer=lexer))
    if expr is None:
        span = Span(len(source), len(source))
        raise ParseError("Unexpected end of input", span, source)
    return expr
