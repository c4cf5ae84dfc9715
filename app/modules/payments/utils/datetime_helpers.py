# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/utils/datetime_helpers.py

Utilidades para manejo consistente de timestamps.

- Todos los datetimes internos son UTC timezone-aware.
- El backend (Java, LocalDateTime) recibe fechas ISO 8601 sin zona.
- El external_reference lleva el instante de emisión en milisegundos Unix.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from datetime import datetime, timedelta, timezone


def utcnow() -> datetime:
    """
    Retorna el timestamp UTC actual (timezone-aware).

    Examples:
        >>> now = utcnow()
        >>> now.tzinfo == timezone.utc
        True
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """
    Asegura que un datetime sea UTC timezone-aware.

    Examples:
        >>> dt_utc = ensure_utc(datetime(2025, 10, 26, 14, 30, 0))
        >>> dt_utc.tzinfo == timezone.utc
        True
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    elif dt.tzinfo != timezone.utc:
        return dt.astimezone(timezone.utc)
    return dt


def to_backend_datetime(dt: datetime) -> str:
    """
    Formato que espera el backend (LocalDateTime): ISO 8601 sin zona, en UTC.

    Examples:
        >>> to_backend_datetime(datetime(2025, 10, 26, 14, 30, 5, 123456, tzinfo=timezone.utc))
        '2025-10-26T14:30:05'
    """
    return ensure_utc(dt).replace(tzinfo=None).isoformat(timespec="seconds")


def to_unix_millis(dt: datetime) -> int:
    """Milisegundos desde epoch para un datetime."""
    return int(ensure_utc(dt).timestamp() * 1000)


def from_unix_millis(millis: int) -> datetime:
    """Datetime UTC a partir de milisegundos desde epoch."""
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)


def add_days(dt: datetime, days: int) -> datetime:
    """Suma `days` días exactos (24h) a un datetime."""
    return dt + timedelta(days=days)


__all__ = [
    "utcnow",
    "ensure_utc",
    "to_backend_datetime",
    "to_unix_millis",
    "from_unix_millis",
    "add_days",
]
# Fin del archivo
