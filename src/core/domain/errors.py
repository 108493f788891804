"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI captura `PatternbookError` en un único punto y decide el exit code.
- `to_dict()` permite adjuntar el error a salidas JSON sin formatear a mano.
"""

from __future__ import annotations

from typing import Any, Mapping


class PatternbookError(Exception):
    """Error base de patternbook.

    Attributes:
        message: mensaje legible
        details: contexto adicional opcional (sugerencias, rutas, etc.)
        code: código estable para máquinas
        exit_code: código de salida sugerido para la CLI
    """

    exit_code = 1

    def __init__(
        self,
        message: str = "patternbook error",
        details: Mapping[str, Any] | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class UnknownPatternError(PatternbookError):
    """La clave pedida no corresponde a ningún slug ni alias del catálogo."""

    exit_code = 2

    def __init__(self, key: str, suggestions: list[str] | None = None) -> None:
        message = f"Unknown pattern: {key!r}"
        if suggestions:
            message += f" (did you mean: {', '.join(suggestions)}?)"
        super().__init__(
            message,
            details={"key": key, "suggestions": suggestions or []},
            code="unknown_pattern",
        )
        self.key = key
        self.suggestions = suggestions or []


class UnknownVariantError(PatternbookError, ValueError):
    """Una factoría de demo recibió un tipo que no sabe construir."""

    def __init__(self, kind: str, known: list[str]) -> None:
        super().__init__(
            f"Unknown type: {kind!r} (expected one of: {', '.join(known)})",
            details={"kind": kind, "known": known},
            code="unknown_variant",
        )
        self.kind = kind
        self.known = known


class DocumentNotFoundError(PatternbookError):
    """No existe la explicación markdown de un patrón."""

    def __init__(self, slug: str, path: str) -> None:
        super().__init__(
            f"No documentation found for {slug!r} at {path}",
            details={"slug": slug, "path": path},
            code="doc_not_found",
        )


class DemoExecutionError(PatternbookError):
    """Una demo lanzó una excepción ejecutándose en modo estricto."""

    def __init__(self, slug: str, cause: BaseException) -> None:
        super().__init__(
            f"Demo {slug!r} failed: {cause}",
            details={"slug": slug, "error_type": type(cause).__name__},
            code="demo_failed",
        )
        self.slug = slug


class InvalidConfigurationError(PatternbookError):
    """Valores de configuración inválidos (entorno, `.env` o `doctor configure`)."""

    exit_code = 2
