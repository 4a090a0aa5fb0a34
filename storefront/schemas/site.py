"""
Pydantic schemas for banners, social links and logos.
"""

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict


class BannerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    titulo: str
    descricao: Optional[str] = None
    imagem_url: str
    link_destino: Optional[str] = None
    ativo: bool = True
    ordem: Optional[int] = None
    created_at: Optional[datetime] = None


class SocialLinkOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    link: str
    icone: str
    ordem: Optional[int] = None


class LogoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    tipo: str
    posicao: str
    url: str
    ativo: bool = True


class BannerListResponse(BaseModel):
    banners: List[BannerOut]


class SocialLinkListResponse(BaseModel):
    redesSociais: List[SocialLinkOut]


class LogoListResponse(BaseModel):
    logos: List[LogoOut]
