'''
tabla formal CSC 364 (opcodes, alias, esquema de operandos)
'''

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from .ast import OperandKind, REG, IMM

@dataclass(frozen=True)
class ISpec:
    """Especificación de una instrucción CSC 364.

    - name: mnemónico canónico
    - opcode: campo de 4 bits (nibble alto del primer byte)
    - operands: tipos de operando en orden, 2 o 3 elementos
    """
    name: str
    opcode: int
    operands: Tuple[OperandKind, ...]

    @property
    def arity(self) -> int:
        return len(self.operands)

# Esquemas de operandos por familia
RR:  Tuple[OperandKind, ...] = (REG, REG)
RRR: Tuple[OperandKind, ...] = (REG, REG, REG)
RRI: Tuple[OperandKind, ...] = (REG, REG, IMM)
RII: Tuple[OperandKind, ...] = (REG, IMM, IMM)
RIR: Tuple[OperandKind, ...] = (REG, IMM, REG)

_SPEC: Dict[str, ISpec] = {}

def _add(name: str, opcode: int, operands: Tuple[OperandKind, ...], *aliases: str):
    s = ISpec(name, opcode, operands)
    for m in (name,) + aliases:
        _SPEC[m] = s

_add("mov",  0x0, RR, "move")
_add("not",  0x1, RR)
_add("and",  0x2, RRR)
_add("or",   0x3, RRR)
_add("add",  0x4, RRR)
_add("sub",  0x5, RRR)
_add("addi", 0x6, RRI)
_add("subi", 0x7, RRI)
_add("set",  0x8, RII)   # byte bajo
_add("seth", 0x9, RII)   # byte alto
_add("incz", 0xA, RIR, "inciz")
_add("decn", 0xB, RIR, "decin")
# Movimientos condicionales
_add("movz", 0xC, RRR, "movez")   # si cero
_add("movx", 0xD, RRR, "movex")   # si distinto de cero
_add("movp", 0xE, RRR, "movep")   # si positivo
_add("movn", 0xF, RRR, "moven")   # si negativo

# Tabla de solo lectura: mnemónico (canónico o alias) -> ISpec
SPEC: Mapping[str, ISpec] = MappingProxyType(_SPEC)

def lookup(mnemonic: str) -> Optional[ISpec]:
    """Devuelve la especificación o None si el mnemónico no existe."""
    return SPEC.get(mnemonic.lower())

def spec(mnemonic: str) -> ISpec:
    """Devuelve la especificación de una instrucción por mnemónico."""
    s = lookup(mnemonic)
    if s is None:
        raise KeyError(f"unknown instruction: {mnemonic}")
    return s
