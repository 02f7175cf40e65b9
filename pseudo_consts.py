# pseudo_consts.py
# Pseudopseudocode のキーワードと Python 出力テンプレートの固定マッピング
# Fixed mapping from Pseudopseudocode keywords to Python output templates.

INDENT = '    '

# --- キーワード (優先順, 先頭一致) ---
# Tested in order, first match wins.
KEYWORDS = (
    ('FUNC ', 'func'),
    ('ENDFUNC', 'endfunc'),
    ('RETURN', 'return'),   # no trailing space: bare RETURN is allowed
    ('IF ', 'if'),
    ('ENDIF', 'endif'),
    ('WHILE ', 'while'),
    ('ENDWHILE', 'endwhile'),
    ('SET ', 'set'),
    ('PRINT ', 'print'),
    ('GETSTRING ', 'getstring'),
    ('CASTASNUM ', 'castasnum'),
    ('#', 'comment'),
)

# 完全一致のみ
EXACT_KEYWORDS = {'ENDFUNC', 'ENDIF', 'ENDWHILE'}

# {rest} = キーワード以降の文字列 (そのまま)
TEMPLATES = {
    'func': 'def {rest}:',
    'return': 'return{rest}',
    'if': 'if ({rest}):',
    'while': 'while ({rest}):',
    'set': '{rest}',
    'print': 'print({rest}, end="")',
    'getstring': '{rest} = input()',
    'castasnum': '{rest} = float({rest})',
    'comment': '#{rest}',
    'blank': '',
    'endfunc': '',
    'endif': '',
    'endwhile': '',
}

# --- ネスト ---
OPENERS = {'func', 'if', 'while'}
CLOSERS = {'endfunc', 'endif', 'endwhile'}

# --- エラー ---
ERROR_PREFIX = 'ERROR: '
FAILED_LINE_MARKER = ERROR_PREFIX + 'FAILED TO PROCESS LINE {line_num}'
INDENT_MISMATCH_MARKER = ERROR_PREFIX + 'INDENTATION MISMATCH'
