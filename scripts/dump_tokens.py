#!/usr/bin/env python
"""Print the token stream of a cfg file, one token per line."""

from __future__ import annotations

import argparse
from pathlib import Path

from parsecfg import CfgError, ParseMode, Token, TokenKind, tokenize
from parsecfg.document import read_source
from parsecfg.options import ParserOptions


def format_token(idx: int, token: Token, source: str) -> str:
    text = source[token.range.start : token.range.end]
    base = f"[{idx}] kind={token.kind.name} span=({token.range.start},{token.range.end}) text={text!r}"

    # Add type-specific details
    if token.kind in (TokenKind.INTEGER, TokenKind.UNSIGNED, TokenKind.FLOAT):
        return base + f" value={token.value!r}"
    if token.kind in (TokenKind.STRING, TokenKind.IDENTIFIER):
        return base + f" str_value={token.value!r}"

    return base


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump the tokens of a cfg file")
    parser.add_argument("path", type=Path, help="File to tokenize")
    parser.add_argument("--output", type=Path, default=None, help="Write to this file instead of stdout")
    parser.add_argument(
        "--no-operators",
        action="store_true",
        help="Treat + - * / %% as unrecognised characters",
    )
    args = parser.parse_args()

    try:
        text = read_source(args.path)
    except CfgError as exc:
        print(f"{args.path}: {exc.code}: {exc.diagnostic.message}")
        return 1

    options = ParserOptions(mode=ParseMode.STRICT, recognize_operators=not args.no_operators)

    try:
        tokens = tokenize(text, options)
    except CfgError as exc:
        location = exc.line_column(text)
        where = f"{args.path}:{location[0]}:{location[1]}" if location else str(args.path)
        print(f"{where}: {exc.code}: {exc.diagnostic.message}")
        print(exc.get_context(text), end="")
        return 1

    lines = [format_token(idx, token, text) for idx, token in enumerate(tokens)]
    if args.output is None:
        print("\n".join(lines))
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")

    print(f"Wrote {len(lines)} tokens to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
