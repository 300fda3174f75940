import re
from typing import Any, Dict, List, Optional

from .ast import Program, Span, Stmt
from .lexer import Token, tokenize_line

_ERROR_LOC_RE = re.compile(r"\[line (\d+), col (\d+)\]")

# option name -> accepted value shape
CHART_OPTIONS = {'width': 'int', 'height': 'int', 'radius': 'int'}
LABEL_OPTIONS = {'color': 'rgb', 'font': 'text', 'size': 'int', 'radius': 'int'}


class Cursor:
    def __init__(self, tokens: List[Token]):
        self.toks = tokens
        self.i = 0

    def peek(self) -> Optional[Token]:
        return self.toks[self.i] if self.i < len(self.toks) else None

    def expect(self, *types: str) -> Token:
        t = self.peek()
        if t and t[0] in types:
            self.i += 1
            return t
        want = '|'.join(types)
        if t:
            raise SyntaxError(f'[line {t[2]}, col {t[3]}] expected {want}, got {t[0]}')
        raise SyntaxError(f'Unexpected end of line: expected {want}')

    def at_end(self) -> bool:
        return self.i >= len(self.toks)


def _parse_int(tok: Token) -> int:
    try:
        return int(tok[1])
    except ValueError:
        raise SyntaxError(f'[line {tok[2]}, col {tok[3]}] expected integer, got {tok[1]!r}') from None


def _parse_ratio(tok: Token) -> float:
    value = float(tok[1])
    if tok[0] == 'PERCENT':
        value /= 100.0
    return value


def _parse_option_value(cur: Cursor, shape: str) -> Any:
    if shape == 'int':
        return _parse_int(cur.expect('NUMBER'))
    if shape == 'text':
        return cur.expect('STRING', 'ID')[1]
    # rgb: three comma-separated integers
    channels = [_parse_int(cur.expect('NUMBER'))]
    for _ in range(2):
        cur.expect('COMMA')
        channels.append(_parse_int(cur.expect('NUMBER')))
    return tuple(channels)


def parse_opts(cur: Cursor, allowed: Dict[str, str]) -> Dict[str, Any]:
    opts: Dict[str, Any] = {}
    while not cur.at_end():
        key_tok = cur.expect('ID')
        key = key_tok[1].lower()
        if key not in allowed:
            raise SyntaxError(
                f'[line {key_tok[2]}, col {key_tok[3]}] unknown option {key!r} '
                f'(expected one of: {", ".join(sorted(allowed))})'
            )
        if key in opts:
            raise SyntaxError(f'[line {key_tok[2]}, col {key_tok[3]}] duplicate option {key!r}')
        cur.expect('EQUAL')
        opts[key] = _parse_option_value(cur, allowed[key])
    return opts


def parse_slice(cur: Cursor, span: Span) -> Stmt:
    label = cur.expect('STRING', 'ID')[1]
    ratio = _parse_ratio(cur.expect('NUMBER', 'PERCENT'))
    color = cur.expect('COLOR', 'STRING', 'ID')[1]
    return Stmt('slice', span, {'label': label, 'ratio': ratio, 'color': color})


def parse_stmt(tokens: List[Token]) -> Stmt:
    cur = Cursor(tokens)
    head = cur.expect('ID')
    keyword = head[1].lower()
    span = Span(head[2], head[3])
    if keyword == 'chart':
        stmt = Stmt('chart', span, opts=parse_opts(cur, CHART_OPTIONS))
    elif keyword == 'labels':
        stmt = Stmt('labels', span, opts=parse_opts(cur, LABEL_OPTIONS))
    elif keyword == 'slice':
        stmt = parse_slice(cur, span)
    else:
        raise SyntaxError(f'[line {head[2]}, col {head[3]}] unknown statement {head[1]!r}')
    extra = cur.peek()
    if extra:
        raise SyntaxError(f'[line {extra[2]}, col {extra[3]}] unexpected {extra[1]!r} after {keyword}')
    return stmt


def _augment_syntax_error(err: SyntaxError, line_text: str) -> Optional[SyntaxError]:
    message = str(err)
    if not line_text or "\n" in message:
        return None
    match = _ERROR_LOC_RE.search(message)
    if not match:
        return None
    col = max(int(match.group(2)), 1)
    caret_line = " " * (col - 1) + "^"
    return SyntaxError(f"{message}\n    {line_text.rstrip()}\n    {caret_line}")


def parse_program(text: str) -> Program:
    prog = Program()
    for i, raw in enumerate(text.splitlines(), start=1):
        try:
            tokens = tokenize_line(raw, i)
            if not tokens:
                continue
            stmt = parse_stmt(tokens)
        except SyntaxError as err:
            augmented = _augment_syntax_error(err, raw)
            if augmented is None:
                raise
            raise augmented from None
        prog.stmts.append(stmt)
    return prog
