"""Adaptadores concretos: transporte httpx, servicio remoto y exportación."""
