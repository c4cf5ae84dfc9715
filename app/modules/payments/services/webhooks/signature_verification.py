# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/webhooks/signature_verification.py

Autenticación del webhook de MercadoPago por secreto compartido.

El secreto configurado (WEBHOOK_SECRET) debe llegar tal cual en el header
X-Signature. La comparación es exacta (sin normalizar mayúsculas ni
espacios) y en tiempo constante.

Fail-closed:
- Sin secreto configurado → ConfigurationError (la ruta responde 500 y
  no procesa nada).
- Header ausente o distinto → False.

Autor: Personal Fit
Fecha: 2026-10-16
"""

from __future__ import annotations

import hmac
import logging
from typing import Mapping, Optional

from app.modules.payments.errors import ConfigurationError

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "x-signature"


def extract_signature(headers: Mapping[str, str], name: str = SIGNATURE_HEADER) -> Optional[str]:
    """Busca el header de firma sin distinguir mayúsculas."""
    name_lower = name.lower()
    for key, value in headers.items():
        if key.lower() == name_lower:
            return value
    return None


def verify_shared_secret(signature: Optional[str], secret: Optional[str]) -> bool:
    """
    Compara la firma recibida contra el secreto configurado.

    Raises:
        ConfigurationError: si no hay secreto configurado.
    """
    if not secret:
        logger.error("Webhook MercadoPago rechazado: WEBHOOK_SECRET no configurado")
        raise ConfigurationError("WEBHOOK_SECRET no configurado")

    if signature is None:
        logger.warning("Webhook MercadoPago rechazado: falta header X-Signature")
        return False

    if not hmac.compare_digest(signature.encode("utf-8"), secret.encode("utf-8")):
        logger.warning("Webhook MercadoPago rechazado: X-Signature no coincide")
        return False

    return True


def verify_webhook_headers(headers: Mapping[str, str], secret: Optional[str]) -> bool:
    """Atajo: extrae X-Signature de los headers y lo verifica."""
    return verify_shared_secret(extract_signature(headers), secret)


__all__ = [
    "SIGNATURE_HEADER",
    "extract_signature",
    "verify_shared_secret",
    "verify_webhook_headers",
]

# Fin del archivo backend/app/modules/payments/services/webhooks/signature_verification.py
