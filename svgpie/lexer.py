import re
from typing import List, Tuple

Token = Tuple[str, str, int, int]  # (type, value, line, col)

SYMBOLS = {
    '=': 'EQUAL',
    ',': 'COMMA',
}

WS = ' \t\r'

_id_re = re.compile(r'[A-Za-z_][A-Za-z0-9_\-]*')
_num_re = re.compile(r'-?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')
_str_re = re.compile(r'"([^"\\]|\\.)*"')  # double-quoted with escapes
_color_re = re.compile(r'#(?:[0-9A-Fa-f]{8}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{3,4})(?![0-9A-Za-z_])')


def tokenize_line(s: str, line_no: int) -> List[Token]:
    tokens: List[Token] = []
    i = 0
    n = len(s)
    while i < n:
        ch = s[i]
        col = i + 1
        if ch in WS:
            i += 1
            continue
        if ch == '#':
            m = _color_re.match(s, i)
            if not m:
                break  # comment
            tokens.append(('COLOR', m.group(0), line_no, col))
            i = m.end()
            continue
        if ch == '"':
            m = _str_re.match(s, i)
            if not m:
                raise SyntaxError(f'[line {line_no}, col {col}] unterminated string literal')
            raw = m.group(0)
            val = re.sub(r'\\(.)', r'\1', raw[1:-1])
            tokens.append(('STRING', val, line_no, col))
            i = m.end()
            continue
        m = _num_re.match(s, i)
        if m:
            end = m.end()
            if end < n and s[end] == '%':
                tokens.append(('PERCENT', m.group(0), line_no, col))
                i = end + 1
            else:
                tokens.append(('NUMBER', m.group(0), line_no, col))
                i = end
            continue
        m = _id_re.match(s, i)
        if m:
            tokens.append(('ID', m.group(0), line_no, col))
            i = m.end()
            continue
        if ch in SYMBOLS:
            tokens.append((SYMBOLS[ch], ch, line_no, col))
            i += 1
            continue
        raise SyntaxError(f'[line {line_no}, col {col}] unexpected character: {ch!r}')
    return tokens
