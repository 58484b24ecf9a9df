"""Núcleo: dominio, contratos, configuración y servicios del login."""
