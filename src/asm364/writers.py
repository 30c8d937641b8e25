from __future__ import annotations
from typing import Iterable, List, TextIO, Union

from .utils import to_hex16, to_bin16
from .encoding import Encoded, WORD_SIZE, to_bytes

# Tipos de registro Intel HEX
REC_DATA = 0x00
REC_EOF = 0x01

# Dirección de 16 bits por registro
IHEX_MAX_BYTES = 0x10000

Target = Union[str, TextIO]

def _ihex_record(rtype: int, address: int, data: bytes = b"") -> str:
    body = bytes((len(data), (address >> 8) & 0xFF, address & 0xFF, rtype)) + data
    checksum = (-sum(body)) & 0xFF
    return ":" + body.hex().upper() + f"{checksum:02X}"

def to_ihex_lines(words: Iterable[Encoded], *, record_size: int = WORD_SIZE) -> List[str]:
    """Registros I8HEX de `record_size` bytes con dirección en bytes, más el registro EOF.

    I8HEX solo direcciona 64 KiB; un programa mayor lanza ValueError en
    lugar de solapar direcciones.
    """
    buf = to_bytes(words)
    if len(buf) > IHEX_MAX_BYTES:
        raise ValueError(f"program is {len(buf)} bytes; Intel HEX (I8HEX) "
                         f"output is limited to {IHEX_MAX_BYTES} bytes")
    lines = [
        _ihex_record(REC_DATA, addr, buf[addr:addr + record_size])
        for addr in range(0, len(buf), record_size)
    ]
    lines.append(_ihex_record(REC_EOF, 0))
    return lines

def to_hex_lines(words: Iterable[Encoded]) -> List[str]:
    return [to_hex16(w.word) for w in words]

def to_bin_lines(words: Iterable[Encoded]) -> List[str]:
    return [to_bin16(w.word) for w in words]

def _write_lines(lines: List[str], target: Target) -> None:
    if isinstance(target, str):
        with open(target, "w", encoding="utf-8") as f:
            _write_lines(lines, f)
        return
    for line in lines:
        target.write(line + "\n")

def write_ihex(words: Iterable[Encoded], target: Target) -> None:
    _write_lines(to_ihex_lines(words), target)

def write_hex(words: Iterable[Encoded], target: Target) -> None:
    _write_lines(to_hex_lines(words), target)

def write_bin(words: Iterable[Encoded], target: Target) -> None:
    _write_lines(to_bin_lines(words), target)

WRITERS = {
    "ihex": write_ihex,
    "hex": write_hex,
    "bin": write_bin,
}
