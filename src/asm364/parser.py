# src/asm364/parser.py
from __future__ import annotations
import re
from typing import Iterable, Iterator, List, Optional

from .lexer import tokenize, split_mnemonic_operands
from .ast import Instruction, Reg, Imm, Operand, REG
from .isa import ISpec, lookup
from .regs import resolve
from .utils import is_unsigned_nbit
from .diagnostics import syntax_error

HEX_PREFIX = "0x"
IMM_BITS = 4

# Sin '+', guiones bajos ni espacios: int() los aceptaría.
# El '-' decimal solo se admite para reportar el error de rango.
_DIGITS_RE = {
    10: re.compile(r"^-?[0-9]+$"),
    16: re.compile(r"^[0-9a-f]+$"),
}

def parse_immediate(token: str) -> int:
    """Convierte un literal decimal o '0x' hexadecimal en un valor de 4 bits.

    Lanza ValueError si el texto no es numérico o si el valor queda fuera
    de [0, 15]. No se admite ningún otro prefijo.
    """
    t = token.lower()
    if t.startswith(HEX_PREFIX):
        text, base = t[len(HEX_PREFIX):], 16
    else:
        text, base = t, 10
    if not _DIGITS_RE[base].match(text):
        raise ValueError(f"invalid numeric value '{token}': "
                         f"invalid literal for base {base}: '{text}'")
    val = int(text, base)
    if not is_unsigned_nbit(val, IMM_BITS):
        raise ValueError(f"invalid numeric value '{token}': "
                         "value must be between 0 and 15 inclusive")
    return val

def parse_register(token: str) -> Reg:
    r = resolve(token)
    if r is None:
        raise ValueError(f"invalid register '{token}'")
    return r

def parse_operands(ispec: ISpec, tokens: List[str], *,
                   mnemonic: Optional[str] = None) -> List[Operand]:
    """Resuelve cada token según la posición en el esquema de la instrucción.

    Falla (ValueError) en el primer token inválido o si el número de
    operandos no coincide con el esquema. `mnemonic` es el nombre escrito
    en el fuente (puede ser un alias) y se usa en el mensaje.
    """
    if len(tokens) != ispec.arity:
        name = (mnemonic or ispec.name).upper()
        raise ValueError(f"instruction '{name}' expects "
                         f"{ispec.arity} operands, {len(tokens)} provided")
    out: List[Operand] = []
    for kind, tok in zip(ispec.operands, tokens):
        if kind == REG:
            out.append(parse_register(tok))
        else:
            out.append(Imm(parse_immediate(tok)))
    return out

def parse_line(raw: str, lineno: int, *, filename: Optional[str] = None) -> Optional[Instruction]:
    """Parsea una línea de código fuente.

    Devuelve None para líneas en blanco o comentarios; lanza AsmSyntaxError
    con el número de línea ante cualquier fallo.
    """
    mnemonic, args = split_mnemonic_operands(tokenize(raw))
    if not mnemonic:
        return None

    ispec = lookup(mnemonic)
    if ispec is None:
        raise syntax_error(f"invalid instruction '{mnemonic}'", line=lineno, file=filename)

    try:
        operands = parse_operands(ispec, args, mnemonic=mnemonic)
    except ValueError as ex:
        raise syntax_error(str(ex), line=lineno, file=filename) from ex

    return Instruction(mnemonic=mnemonic, spec=ispec, operands=tuple(operands), line=lineno)

def parse(lines: Iterable[str], *, filename: Optional[str] = None) -> Iterator[Instruction]:
    """
    Recorre las líneas y produce una Instruction por cada línea con código.

    Reglas:
      - Comentarios: línea cuyo primer carácter no blanco es '#'.
      - Líneas vacías: se ignoran, pero cuentan para la numeración.
      - Instrucciones: mnemónico + operandos separados por espacios.

    El primer error detiene el recorrido (AsmSyntaxError).
    """
    for lineno, raw in enumerate(lines, start=1):
        ins = parse_line(raw, lineno, filename=filename)
        if ins is not None:
            yield ins
