"""
Pydantic schemas for stores (lojas) and salespeople (vendedores).
"""

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator


class StoreOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    endereco: str
    horario_funcionamento: Optional[str] = None
    status: Optional[str] = None
    ordem: Optional[int] = None
    telefones: List[str] = Field(default_factory=list)
    imagem_principal: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("telefones", mode="before")
    @classmethod
    def _phones_default(cls, value):
        return value or []


class SalespersonOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    whatsapp: str = Field(..., description="Messaging handle, used verbatim in the chat link")
    cargo: Optional[str] = None
    foto_url: Optional[str] = None
    loja_id: int
    ativo: bool = True


class StoreListResponse(BaseModel):
    lojas: List[StoreOut]


class SalespersonListResponse(BaseModel):
    vendedores: List[SalespersonOut]
    fallback: Optional[bool] = Field(None, description="Set when placeholder salespeople were returned")
