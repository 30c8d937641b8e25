'''
mapa de registros (nombres canónicos y alias), validaciones
'''

from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Optional

from .ast import Reg

# Mnemónico de registro -> dirección de 4 bits
REGISTERS: Mapping[str, int] = MappingProxyType({
    "r0": 0x0, "r1": 0x1, "r2": 0x2, "r3": 0x3,
    "r4": 0x4, "r5": 0x5, "r6": 0x6, "r7": 0x7,
    "r8": 0x8, "r9": 0x9, "ra": 0xA, "rb": 0xB,
    "rc": 0xC, "rd": 0xD, "re": 0xE, "rf": 0xF,
    # alias de dos dígitos
    "r10": 0xA, "r11": 0xB, "r12": 0xC, "r13": 0xD, "r14": 0xE, "r15": 0xF,
    # registros con función especial
    "in": 0x6,      # entrada (r6)
    "out0": 0xD,    # primera salida (rd)
    "out1": 0xE,    # segunda salida (re)
    "pc": 0xF,      # contador de programa (rf)
})

def resolve(token: str) -> Optional[Reg]:
    """Busca el registro; None si el mnemónico no existe."""
    t = token.strip().lower()
    num = REGISTERS.get(t)
    if num is None:
        return None
    return Reg(name=t, num=num)

def is_reg(token: str) -> bool:
    """Indica si el token representa un registro válido."""
    return resolve(token) is not None

def reg_num(token: str) -> int:
    """Devuelve la dirección 0..15 del registro o lanza ValueError."""
    r = resolve(token)
    if r is None:
        raise ValueError(f"invalid register '{token}'")
    return r.num
