'''
clase Diagnostic y AsmSyntaxError (archivo, línea, mensaje)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

# El ensamblador solo reporta errores: no hay advertencias ni modo parcial
Severity = Literal["error"]

_SEV_TO_LABEL = {
    "error": "ERROR",
}

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico con ubicación opcional (archivo y línea).

    Se imprime como 'archivo:línea: ERROR: mensaje'.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    file: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
        if loc:
            loc += ": "
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        return f"{loc}{sev}: {self.message}"

def error(message: str, *, line: int | None = None,
          file: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, file)


class AsmSyntaxError(Exception):
    """Error de sintaxis en una línea de código fuente.

    Es el único error que cruza la frontera del ensamblador: mnemónico
    desconocido, registro inválido, literal mal formado o fuera de rango
    y número de operandos incorrecto acaban todos aquí.
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def line(self) -> Optional[int]:
        return self.diagnostic.line

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return f"Syntax error on line {self.line}: {self.message}"


def syntax_error(message: str, *, line: int, file: str | None = None) -> AsmSyntaxError:
    """Construye un AsmSyntaxError listo para lanzar."""
    return AsmSyntaxError(error(message, line=line, file=file))
