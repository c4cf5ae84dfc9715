# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/errors.py

Excepciones semánticas del subsistema de reconciliación MercadoPago.

Jerarquía:
    PaymentsError
    ├── ConfigurationError        (falta token/secret; 500, sin reintento)
    ├── AuthenticationError       (firma ausente/inválida; 401)
    ├── UnsupportedNotification   (tipo no soportado; solo taxonomía, ver clase)
    ├── MalformedReference        (external_reference ilegible; no-op)
    ├── GatewayError
    │   ├── GatewayUnavailable    (red / timeout / 5xx)
    │   ├── GatewayRejected       (4xx al crear preferencia)
    │   └── PaymentNotFound       (404 al consultar pago)
    └── BackendError
        ├── BackendWriteFailed    (POST del registro no-2xx)
        ├── DuplicatePayment      (409: confNumber ya registrado)
        └── BackendUnavailable    (listado de pagos pendientes falló)

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

from typing import Optional


class PaymentsError(Exception):
    """Raíz de los errores del módulo Payments."""

    error_code: str = "payments_error"


class ConfigurationError(PaymentsError):
    """Falta configuración obligatoria (access token o webhook secret)."""

    error_code = "configuration_error"


class AuthenticationError(PaymentsError):
    """La firma del webhook está ausente o no coincide."""

    error_code = "invalid_signature"


class UnsupportedNotification(PaymentsError):
    """
    La notificación no es de un tipo que se reconcilie.

    Solo nombra el caso en la taxonomía: Reconciler.reconcile no la lanza,
    devuelve un resultado con reason="unsupported-kind".
    """

    error_code = "unsupported_notification"

    def __init__(self, kind: Optional[str]) -> None:
        self.kind = kind
        super().__init__(f"Tipo de notificación no procesado: {kind!r}")


class MalformedReference(PaymentsError):
    """El external_reference no respeta el formato {dni}-{producto}-..."""

    error_code = "malformed_reference"

    def __init__(self, raw: Optional[str], reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"external_reference inválido ({reason}): {raw!r}")


class GatewayError(PaymentsError):
    """Error al comunicarse con MercadoPago."""

    error_code = "gateway_error"

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class GatewayUnavailable(GatewayError):
    """MercadoPago no respondió (red, timeout o 5xx)."""

    error_code = "gateway_unavailable"


class GatewayRejected(GatewayError):
    """MercadoPago rechazó la solicitud (4xx)."""

    error_code = "gateway_rejected"


class PaymentNotFound(GatewayError):
    """MercadoPago no conoce el pago consultado (404)."""

    error_code = "payment_not_found"

    def __init__(self, payment_id: str) -> None:
        self.payment_id = payment_id
        super().__init__(f"Pago {payment_id} no encontrado en MercadoPago", status_code=404)


class BackendError(PaymentsError):
    """Error al comunicarse con el backend de Personal Fit."""

    error_code = "backend_error"

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body_snippet: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.body_snippet = (body_snippet or "")[:300]
        super().__init__(message)


class BackendWriteFailed(BackendError):
    """El backend no aceptó el registro de pago."""

    error_code = "backend_write_failed"


class DuplicatePayment(BackendError):
    """El backend ya tiene un pago con el mismo confNumber."""

    error_code = "duplicate_payment"


class BackendUnavailable(BackendError):
    """No se pudo consultar el backend (listado de pendientes)."""

    error_code = "backend_unavailable"


__all__ = [
    "PaymentsError",
    "ConfigurationError",
    "AuthenticationError",
    "UnsupportedNotification",
    "MalformedReference",
    "GatewayError",
    "GatewayUnavailable",
    "GatewayRejected",
    "PaymentNotFound",
    "BackendError",
    "BackendWriteFailed",
    "DuplicatePayment",
    "BackendUnavailable",
]

# Fin del archivo backend/app/modules/payments/errors.py
