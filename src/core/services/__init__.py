"""Servicios del Core (validación y orquestación del login)."""
