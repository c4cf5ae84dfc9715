# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/utils/external_reference.py

Codec del external_reference que viaja a MercadoPago y vuelve sin cambios.

Formato (versión 1, posicional, separado por '-'):

    {dni}-{productId}-{unixMillis}-{nonce}

Reglas de decodificación:
- Se requieren al menos 3 segmentos.
- El segmento 0 debe ser un entero (DNI del socio).
- El segmento 1 es el productId.
- El segmento 2 se interpreta como milisegundos Unix si es numérico.
- El segmento 3 es el nonce.
- Segmentos adicionales se conservan en `extras` y no afectan la
  decodificación: versiones futuras solo pueden AGREGAR campos al final.

No se normalizan mayúsculas ni espacios: se decodifica el string exacto
que devuelve la pasarela.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

import re
import secrets
import string
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from app.modules.payments.errors import MalformedReference
from .datetime_helpers import from_unix_millis, to_unix_millis, utcnow

REFERENCE_VERSION = 1
REFERENCE_DELIMITER = "-"
MIN_SEGMENTS = 3

NONCE_ALPHABET = string.ascii_lowercase + string.digits
NONCE_LENGTH = 6

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class ExternalReference:
    """Valor decodificado de un external_reference."""

    subject_id: int
    product_id: str
    issued_at: Optional[datetime] = None
    nonce: Optional[str] = None
    extras: Tuple[str, ...] = field(default_factory=tuple)

    def encode(self) -> str:
        """Serializa de vuelta al formato posicional (incluye extras)."""
        segments = [str(self.subject_id), self.product_id]
        if self.issued_at is not None:
            segments.append(str(to_unix_millis(self.issued_at)))
        if self.nonce is not None:
            segments.append(self.nonce)
        segments.extend(self.extras)
        return REFERENCE_DELIMITER.join(segments)


def generate_nonce(length: int = NONCE_LENGTH) -> str:
    """Sufijo aleatorio base36 (sin guiones)."""
    return "".join(secrets.choice(NONCE_ALPHABET) for _ in range(length))


def encode_reference(
    subject_id: int,
    product_id: str,
    *,
    issued_at: Optional[datetime] = None,
    nonce: Optional[str] = None,
) -> str:
    """
    Genera el external_reference para una preferencia de pago.

    Raises:
        ValueError: si subject_id es negativo o algún campo contiene '-'.
    """
    if isinstance(subject_id, bool) or not isinstance(subject_id, int):
        raise ValueError("subject_id debe ser un entero")
    if subject_id < 0:
        raise ValueError("subject_id no puede ser negativo")
    if REFERENCE_DELIMITER in product_id:
        raise ValueError(f"product_id no puede contener {REFERENCE_DELIMITER!r}")

    nonce = nonce if nonce is not None else generate_nonce()
    if REFERENCE_DELIMITER in nonce:
        raise ValueError(f"nonce no puede contener {REFERENCE_DELIMITER!r}")

    reference = ExternalReference(
        subject_id=subject_id,
        product_id=product_id,
        issued_at=issued_at or utcnow(),
        nonce=nonce,
    )
    return reference.encode()


def decode_reference(raw: Optional[str]) -> ExternalReference:
    """
    Decodifica un external_reference.

    Raises:
        MalformedReference: si hay menos de 3 segmentos o el DNI no es entero.
    """
    if not isinstance(raw, str) or not raw:
        raise MalformedReference(raw, "vacío")

    segments = raw.split(REFERENCE_DELIMITER)
    if len(segments) < MIN_SEGMENTS:
        raise MalformedReference(raw, f"se esperaban al menos {MIN_SEGMENTS} segmentos")

    if not _DIGITS.fullmatch(segments[0]):
        raise MalformedReference(raw, "el primer segmento no es un entero")

    issued_at = None
    if _DIGITS.fullmatch(segments[2]):
        try:
            issued_at = from_unix_millis(int(segments[2]))
        except (OverflowError, OSError, ValueError):
            issued_at = None

    return ExternalReference(
        subject_id=int(segments[0]),
        product_id=segments[1],
        issued_at=issued_at,
        nonce=segments[3] if len(segments) > 3 else None,
        extras=tuple(segments[4:]),
    )


def try_decode_reference(raw: Optional[str]) -> Optional[ExternalReference]:
    """Igual que decode_reference pero devuelve None en lugar de lanzar."""
    try:
        return decode_reference(raw)
    except MalformedReference:
        return None


__all__ = [
    "ExternalReference",
    "REFERENCE_VERSION",
    "REFERENCE_DELIMITER",
    "generate_nonce",
    "encode_reference",
    "decode_reference",
    "try_decode_reference",
]

# Fin del archivo backend/app/modules/payments/utils/external_reference.py
