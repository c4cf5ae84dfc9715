# -*- coding: utf-8 -*-
"""
backend/tests/modules/payments/services/webhooks/test_signature_verification.py

Tests de la verificación del secreto compartido (X-Signature).

Autor: Personal Fit
Fecha: 2026-10-16
"""

import pytest

from app.modules.payments.errors import ConfigurationError
from app.modules.payments.services.webhooks import (
    extract_signature,
    verify_shared_secret,
    verify_webhook_headers,
)


class TestExtractSignature:

    @pytest.mark.parametrize("header", ["x-signature", "X-Signature", "X-SIGNATURE"])
    def test_case_insensitive(self, header):
        assert extract_signature({header: "abc"}) == "abc"

    def test_missing_header(self):
        assert extract_signature({"content-type": "application/json"}) is None


class TestVerifySharedSecret:

    def test_exact_match(self):
        assert verify_shared_secret("testsecret", "testsecret") is True

    @pytest.mark.parametrize("signature", ["wrong", "", "testsecret ", "TESTSECRET", None])
    def test_mismatch_or_missing(self, signature):
        assert verify_shared_secret(signature, "testsecret") is False

    @pytest.mark.parametrize("secret", [None, ""])
    def test_unconfigured_secret_raises(self, secret):
        with pytest.raises(ConfigurationError):
            verify_shared_secret("testsecret", secret)

    def test_non_ascii_signature(self):
        assert verify_shared_secret("contraseña", "contraseña") is True
        assert verify_shared_secret("contrasena", "contraseña") is False


def test_verify_webhook_headers():
    assert verify_webhook_headers({"X-Signature": "s3cr3t"}, "s3cr3t") is True
    assert verify_webhook_headers({}, "s3cr3t") is False
