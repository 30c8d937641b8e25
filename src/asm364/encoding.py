# src/asm364/encoding.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .ast import Instruction
from .utils import nibble

WORD_SIZE = 2   # bytes por instrucción

# ---------------- Resultados de codificación ----------------

@dataclass(frozen=True)
class Encoded:
    data: bytes   # 2 bytes
    line: int
    mnemonic: str

    @property
    def word(self) -> int:
        """Palabra de 16 bits (byte0 en la parte alta)."""
        return int.from_bytes(self.data, "big")

# ---------------- Empaquetado de bits ----------------

def encode_word(opcode: int, operands: Sequence[int]) -> bytes:
    """Empaqueta opcode y operandos en 2 bytes.

        byte0 = opcode << 4 | op0
        byte1 = op1 << 4    | op2   (op2 = 0 con 2 operandos)
    """
    op2 = operands[2] if len(operands) > 2 else 0
    b0 = nibble(opcode) << 4 | nibble(operands[0])
    b1 = nibble(operands[1]) << 4 | nibble(op2)
    return bytes((b0, b1))

# ---------------- Codificador principal ----------------

def encode(instructions: Iterable[Instruction]) -> List[Encoded]:
    return [
        Encoded(encode_word(ins.opcode, ins.nibbles()), ins.line, ins.mnemonic)
        for ins in instructions
    ]

def to_bytes(words: Iterable[Encoded]) -> bytes:
    """Concatena las palabras en un único buffer, en orden de fuente."""
    return b"".join(w.data for w in words)
