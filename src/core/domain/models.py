"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación en el borde: la API CSP devuelve JSON con nombres PascalCase y
  muchos campos nulos; los alias y defaults lo normalizan en un solo sitio.
- `model_dump(by_alias=True)` produce directamente el payload que espera la API.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, SecretStr, field_validator
from pydantic.config import ConfigDict


class Credentials(BaseModel):
    """Credenciales para el intercambio OAuth. Inmutables."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., description="Usuario CSP.")
    password: SecretStr = Field(..., description="Password CSP.")
    base_url: str = Field(..., description="Base URL del servidor de autorización.")


class OAuthToken(BaseModel):
    """Respuesta del endpoint de token. Solo nos interesa `access_token`."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    access_token: str = Field(..., min_length=1, description="Bearer token.")


class Account(BaseModel):
    """Cuenta accesible por el usuario.

    El resto del perfil (nombre, direcciones...) es opaco para el workflow y se
    conserva tal cual gracias a `extra="allow"`.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    account_id: int | None = Field(
        default=None,
        alias="AccountId",
        description="Identificador de la cuenta en CSP.",
    )


class ServiceType(str, Enum):
    """Tipo de fila en la service matrix."""

    COLLECTION = "C"
    DELIVERY = "D"


_SERVICE_TYPE_TAGS: dict[str, ServiceType] = {
    "c": ServiceType.COLLECTION,
    "collection": ServiceType.COLLECTION,
    "d": ServiceType.DELIVERY,
    "delivery": ServiceType.DELIVERY,
}


class ServiceMatrixEntry(BaseModel):
    """Fila de la service matrix (nivel de servicio + ventana horaria)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    service_level_id: int | None = Field(default=None, alias="ServiceLevelId")
    service_matrix_id: int | None = Field(default=None, alias="ServiceMatrixId")
    type: ServiceType | str | None = Field(
        default=None,
        alias="Type",
        description="'C'/'collection' o 'D'/'delivery'; otros valores nunca hacen match.",
    )
    service_time_id: int | None = Field(default=None, alias="ServiceTimeId")
    start_time: int | None = Field(default=None, alias="StartTime")
    end_time: int | None = Field(default=None, alias="EndTime")
    advance_days: float | None = Field(default=None, alias="AdvanceDays")
    permitted_days: Any = Field(
        default=None,
        alias="PermittedDays",
        description="Reglas de días permitidos; la API las aplica, aquí se ignoran.",
    )

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value: object) -> object:
        if isinstance(value, str):
            return _SERVICE_TYPE_TAGS.get(value.strip().lower(), value)
        return value


class ServiceLevelPair(BaseModel):
    """Par recogida/entrega resuelto para un mismo matrix id."""

    model_config = ConfigDict(frozen=True)

    matrix_id: int
    collection: ServiceMatrixEntry
    delivery: ServiceMatrixEntry


class JobRequest(BaseModel):
    """Campos mínimos para dar de alta un job (`PortalJob` en la API)."""

    model_config = ConfigDict(populate_by_name=True)

    account_id: int = Field(..., alias="AccountId")
    service_level_id: int = Field(..., alias="ServiceLevelId")
    collection_date: int = Field(..., alias="CollectionDate", description="yyyyMMdd")
    collection_time: int = Field(default=0, alias="CollectionTime")
    collection_start_time: int = Field(default=0, alias="CollectionStartTime")
    collection_end_time: int = Field(default=0, alias="CollectionEndTime")
    collection_address1: str = Field(..., alias="CollectionAddress1")
    delivery_date: int = Field(..., alias="DeliveryDate", description="yyyyMMdd")
    delivery_time: int = Field(default=0, alias="DeliveryTime")
    delivery_start_time: int = Field(default=0, alias="DeliveryStartTime")
    delivery_end_time: int = Field(default=0, alias="DeliveryEndTime")
    delivery_address1: str = Field(..., alias="DeliveryAddress1")
    weight: int = Field(default=0, alias="Weight")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
