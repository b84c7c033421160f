#!/usr/bin/env python
import argparse
import logging
import sys
from pathlib import Path

from dronescript.diagnostics import format_diagnostic
from dronescript.lexer import Token, dump_tokens, tokenize

logger = logging.getLogger("dump_tokens")


def format_token(idx: int, token: Token) -> str:
    return f"[{idx}] kind={token.kind.name} text={token.text!r} at={token.position}"


def main() -> None:
    parser = argparse.ArgumentParser(description="Lex a DroneScript file and print its tokens.")
    parser.add_argument("path", type=Path, help="DroneScript source file")
    parser.add_argument("-o", "--output", type=Path, help="write tokens here instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    text = args.path.read_text(encoding="utf-8")
    tokens, diagnostics = tokenize(text)
    logger.debug("Lexed %s: %d tokens, %d diagnostics", args.path, len(tokens), len(diagnostics))

    if args.output is None:
        dump_tokens(tokens, diagnostics)
    else:
        lines = [format_token(idx, token) for idx, token in enumerate(tokens)]
        lines.extend(format_diagnostic(diagnostic) for diagnostic in diagnostics)
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text("\n".join(lines) + "\n", encoding="utf-8")
        print(f"Wrote {len(tokens)} tokens to {args.output}")

    if diagnostics:
        sys.exit(1)


if __name__ == "__main__":
    main()
