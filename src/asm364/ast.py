'''
dataclases del modelo (Instruction, Reg, Imm, OperandKind)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Tuple, Union

if TYPE_CHECKING:
    from .isa import ISpec

# Tipos de operando: conjunto cerrado, nunca se amplía en tiempo de ejecución
OperandKind = Literal["reg", "imm"]
REG: OperandKind = "reg"
IMM: OperandKind = "imm"

# ---- Operandos ----

@dataclass(frozen=True)
class Reg:
    """Registro resuelto con su dirección 0..15."""
    name: str   # mnemónico tal como apareció ('pc', 'r6', ...)
    num: int    # 0..15

@dataclass(frozen=True)
class Imm:
    """Inmediato sin signo de 4 bits (0..15)."""
    value: int

Operand = Union[Reg, Imm]

def operand_value(op: Operand) -> int:
    """Valor de 4 bits de un operando, sea registro o inmediato."""
    if isinstance(op, Reg):
        return op.num
    return op.value

# ---- Nodos a nivel de fuente ----

@dataclass(frozen=True)
class Instruction:
    """Instrucción validada: especificación, operandos resueltos y línea de origen."""
    mnemonic: str
    spec: 'ISpec'
    operands: Tuple[Operand, ...]
    line: int

    @property
    def opcode(self) -> int:
        return self.spec.opcode

    def nibbles(self) -> Tuple[int, ...]:
        return tuple(operand_value(op) for op in self.operands)
