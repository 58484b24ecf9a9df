"""Contratos del Core (Protocol).

Por qué:
- El orquestador depende de `AuthenticationService`, y el servicio remoto de
  `HTTPTransport`; los adaptadores concretos viven en `adapters`.
"""
