# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/schemas/common_schemas.py

Esquemas comunes para el módulo Payments.

El frontend y el backend (Java) hablan camelCase; internamente usamos
snake_case. CamelModel acepta ambos al validar y serializa en camelCase.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Modelo base con alias camelCase y población por nombre."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Dict listo para JSONResponse (camelCase, tipos JSON)."""
        return self.model_dump(mode="json", by_alias=True)


def coerce_optional_str(value: Any) -> Any:
    """Ids que llegan como número (MercadoPago) se tratan como string."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    return value


__all__ = ["CamelModel", "coerce_optional_str"]

# Fin del archivo backend/app/modules/payments/schemas/common_schemas.py
