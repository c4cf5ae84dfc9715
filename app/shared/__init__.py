# -*- coding: utf-8 -*-
"""
backend/app/shared/__init__.py

Infraestructura compartida: configuración, middlewares, scheduler y
utilidades. No inicializa settings en import-time.

Autor: Personal Fit
Fecha: 2026-10-16
"""

# Fin del archivo backend/app/shared/__init__.py
