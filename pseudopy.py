#!/usr/bin/env python3
# pseudopy.py -- Pseudopseudocode -> Python トランスパイラ
# - 1行ずつ先頭キーワードで分類し、文字列置換で Python に変換する
# - ネストの深さ (indent_level) だけを数えてインデントを決める
# - エラーは例外ではなく "ERROR: ..." の文字列として返す

import re
import sys
from collections import namedtuple

from pseudo_consts import (
    INDENT, KEYWORDS, EXACT_KEYWORDS, TEMPLATES, OPENERS, CLOSERS,
    ERROR_PREFIX, FAILED_LINE_MARKER, INDENT_MISMATCH_MARKER,
)

had_error = False

Config = namedtuple('Config', ['input_path', 'output_path'])

_newline_re = re.compile("\r\n|[\n\v\f\r\x85\u2028\u2029]")
_failed_line_re = re.compile(r"ERROR: FAILED TO PROCESS LINE \d+")


def error(msg, line_num=None):
    global had_error
    prefix = f"[Line {line_num}] " if line_num else ""
    sys.stderr.write(f"Error: {prefix}{msg}\n")
    had_error = True


def split_lines(text: str) -> list:
    """
    デコード済みテキストを改行で分割する。
    末尾の改行は空行を1つ残す ("a\\n" -> ["a", ""])。
    """
    return _newline_re.split(text)


def classify_line(trimmed):
    """Return (kind, rest) for a line with leading whitespace removed.

    kind is None when the line is not recognized.
    """
    if not trimmed:
        return 'blank', ''
    for keyword, kind in KEYWORDS:
        if keyword in EXACT_KEYWORDS:
            if trimmed == keyword:
                return kind, ''
        elif trimmed.startswith(keyword):
            return kind, trimmed[len(keyword):]
    return None, trimmed


def translate_line(trimmed):
    kind, rest = classify_line(trimmed)
    if kind is None:
        return None, ''
    # str.format はしない: rest の中の { } をそのまま残す
    return kind, TEMPLATES[kind].replace('{rest}', rest)


def translate(lines):
    """
    Pseudopseudocode の行リストを Python コード (1つの文字列) に変換する。

    - 出力は入力1行につき1行、各行は "\\n" で終わる。
    - 開きキーワード (FUNC/IF/WHILE) の行は外側の深さでインデントし、
      その後で深さを +1 する。
    - 閉じキーワード (END*) は先に深さを -1 し、インデントだけを出力する。
    - 認識できない行があれば "ERROR: FAILED TO PROCESS LINE n" を返す
      (複数あれば最後の行)。
    - 深さが負になったらそこで処理を打ち切る。最後に深さが 0 でなければ
      "ERROR: INDENTATION MISMATCH" を返す (打ち切った場合も含む)。
    """
    indent_level = 0
    failed_line = None
    out = []

    for line_num, line in enumerate(lines, start=1):
        trimmed = line.lstrip()
        kind, python_line = translate_line(trimmed)

        if kind is None:
            # 最後の失敗行が勝つ。残りの行も深さの計算は続ける
            failed_line = line_num
        elif kind in CLOSERS:
            indent_level -= 1
            if indent_level < 0:
                break

        out.append(INDENT * indent_level + python_line + "\n")

        if kind in OPENERS:
            indent_level += 1

    if indent_level != 0:
        return INDENT_MISMATCH_MARKER
    if failed_line is not None:
        return FAILED_LINE_MARKER.format(line_num=failed_line)
    return "".join(out)


def is_error(code):
    return code == INDENT_MISMATCH_MARKER or _failed_line_re.fullmatch(code) is not None


def parse_args(argv):
    if len(argv) < 2:
        sys.stderr.write("Usage: pseudopy <input_file> <output_file>\n")
        sys.exit(1)
    return Config(argv[0], argv[1])


def run(config):
    global had_error
    had_error = False

    print("Input file: " + config.input_path)
    print("Output file: " + config.output_path)

    try:
        inf = open(config.input_path, 'rb')
    except OSError:
        error("CANNOT OPEN " + config.input_path)
        return 1
    with inf:
        try:
            # "a": 開くだけでは中身を消さない (変換が成功してから truncate)
            outf = open(config.output_path, 'a', encoding='utf-8', newline='')
        except OSError:
            error("CANNOT OPEN " + config.output_path)
            return 1
        with outf:
            try:
                source_text = inf.read().decode('utf-8')
            except UnicodeDecodeError:
                error("CANNOT CONVERT " + config.input_path + " DATA TO A STRING")
                return 1

            python_code = translate(split_lines(source_text))
            if is_error(python_code):
                # エラー文字列も出力ファイルに書く (元の挙動)
                error(python_code[len(ERROR_PREFIX):])

            try:
                outf.seek(0)
                outf.truncate(0)
                outf.write(python_code)
            except OSError:
                error("WRITING FAILED")
                return 1

    print("DONE!")
    return 0


def main():
    sys.exit(run(parse_args(sys.argv[1:])))


if __name__ == "__main__":
    main()
