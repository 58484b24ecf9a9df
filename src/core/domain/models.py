"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en el borde: un `Investor` solo existe si el JSON
  recibido trae todos los campos con el tipo correcto.
- Los modelos son inmutables (`frozen`), así que pueden compartirse entre
  observers sin riesgo de mutación.

Nota:
- La API responde en snake_case (`investor_name`); también se acepta
  camelCase (`investorName`) vía alias.
- Modo estricto: `"1"` no es un `int` ni `0` un `bool`. Se validan desde
  JSON (`model_validate_json`), donde los arrays llenan las tuplas.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class _ApiModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        strict=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class EnterpriseType(_ApiModel):
    id: int = Field(..., description="Identificador del tipo de empresa.")
    enterprise_type_name: str = Field(..., description="Nombre del tipo (p.ej. 'Fintech').")


class Enterprise(_ApiModel):
    """Empresa dentro del portafolio de un inversor."""

    id: int = Field(..., description="Identificador de la empresa.")
    enterprise_name: str = Field(..., description="Nombre comercial.")
    description: str = Field(default="", description="Descripción pública.")
    city: str = Field(default="", description="Ciudad.")
    country: str = Field(default="", description="País.")
    photo: str | None = Field(default=None, description="Ruta de la foto (relativa al host).")
    value: float = Field(default=0.0, description="Valor de la empresa.")
    share_price: float = Field(default=0.0, description="Precio por acción.")
    enterprise_type: EnterpriseType | None = Field(default=None)


class Portfolio(_ApiModel):
    enterprises_number: int = Field(..., ge=0, description="Cantidad de empresas en cartera.")
    enterprises: tuple[Enterprise, ...] = Field(
        ...,
        description="Empresas en cartera, en el orden recibido (puede ser vacía).",
    )


class Investor(_ApiModel):
    """Agregado principal: el inversor autenticado.

    Por qué todos los campos son obligatorios:
    - Un payload parcial no debe producir un `Investor`; debe producir un
      error de decodificación (ver `decode_investor`).
    """

    id: int = Field(..., description="Identificador del inversor.")
    investor_name: str = Field(..., description="Nombre completo.")
    email: str = Field(..., description="Email de la cuenta.")
    city: str = Field(..., description="Ciudad.")
    country: str = Field(..., description="País.")
    balance: float = Field(..., description="Saldo disponible.")
    photo: str = Field(..., description="Ruta de la foto (puede ser vacía).")
    portfolio: Portfolio = Field(...)
    portfolio_value: float = Field(..., description="Valor total del portafolio.")
    first_access: bool = Field(..., description="Primer acceso a la plataforma.")
    super_angel: bool = Field(..., description="Inversor super angel.")

    @field_validator("photo", mode="before")
    @classmethod
    def _null_photo_as_empty(cls, value: object) -> object:
        # La API envía `null` para inversores sin foto.
        return "" if value is None else value


class InvestorEnvelope(BaseModel):
    """Respuesta de `sign_in`: `{"investor": {...}, "enterprise": null, "success": true}`."""

    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)

    investor: Investor
    success: bool = True
