from __future__ import annotations
import argparse, sys
from typing import Iterable, List, Optional

from .parser import parse
from .encoding import Encoded, encode
from .writers import WRITERS
from .diagnostics import AsmSyntaxError

def assemble_lines(lines: Iterable[str], *, filename: str | None = None) -> List[Encoded]:
    """Parsea y codifica todas las líneas.
    Lanza AsmSyntaxError en el primer fallo; no hay resultado parcial."""
    return encode(parse(lines, filename=filename))

def assemble_text(text: str, *, filename: str | None = None) -> List[Encoded]:
    return assemble_lines(text.splitlines(), filename=filename)

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="asm364",
                                 description="CLI assembler for the CSC 364 assembly language")
    ap.add_argument("-i", "--input", help="archivo de entrada (por defecto: stdin)")
    ap.add_argument("-o", "--output", help="archivo de salida (por defecto: stdout)")
    ap.add_argument("-f", "--format", choices=sorted(WRITERS), default="ihex",
                    help="formato de salida: ihex (Intel HEX), hex o bin (una palabra por línea)")
    args = ap.parse_args(argv)

    filename: Optional[str] = args.input
    try:
        if args.input:
            with open(args.input, "r", encoding="utf-8") as f:
                words = assemble_lines(f, filename=filename)
        else:
            words = assemble_lines(sys.stdin, filename="<stdin>")
    except AsmSyntaxError as ex:
        print(ex.diagnostic, file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as ex:
        print(f"ERROR: unable to read {args.input or '<stdin>'}: {ex}", file=sys.stderr)
        return 2

    # Solo se escribe una vez que todo el fuente se ha ensamblado sin errores
    write = WRITERS[args.format]
    try:
        write(words, args.output if args.output else sys.stdout)
    except (OSError, ValueError) as ex:
        print(f"ERROR: unable to write {args.output or '<stdout>'}: {ex}", file=sys.stderr)
        return 3

    if args.output:
        print(f"OK: {len(words)} instructions -> {args.output}", file=sys.stderr)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
