#!/usr/bin/env python3
from __future__ import annotations
import logging
import sys
from typing import List, Optional

from errors import ParserError
from parser import parse_polynomial


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    exprs = sys.argv[1:] if argv is None else argv
    status = 0
    for expr in exprs:
        try:
            print(parse_polynomial(expr))
        except ParserError as e:
            print(f"SyntaxError at {e.position}: {e.message}", file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
