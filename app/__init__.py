# -*- coding: utf-8 -*-
"""
backend/app/__init__.py

Inicializador del paquete principal 'app' del servicio de pagos de
Personal Fit.

Permite que los módulos internos se importen como 'app.*' cuando la
raíz del repositorio está en PYTHONPATH.

Autor: Personal Fit
Fecha: 2026-10-16
"""

# Fin del archivo backend/app/__init__.py
