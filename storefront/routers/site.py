"""
Site content endpoints: banners, social links and logos.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.core.database import get_db
from storefront.core.errors import upstream_failure
from storefront.schemas.site import (
    BannerOut,
    SocialLinkOut,
    LogoOut,
    BannerListResponse,
    SocialLinkListResponse,
    LogoListResponse,
)
from storefront.services.site_repository import BannerRepository, SocialLinkRepository, LogoRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Site"])


@router.get("/banners", response_model=BannerListResponse)
def list_banners(
    db: Session = Depends(get_db),
    ativo: bool = Query(True, description="Active banners by default"),
):
    """List banners by display order"""
    try:
        banners = BannerRepository.get_all(db, ativo=ativo)
    except SQLAlchemyError:
        raise upstream_failure(logger, "banners")

    return BannerListResponse(banners=[BannerOut.model_validate(b) for b in banners])


@router.get("/redes-sociais", response_model=SocialLinkListResponse)
def list_social_links(db: Session = Depends(get_db)):
    """List active social network links"""
    try:
        links = SocialLinkRepository.get_active(db)
    except SQLAlchemyError:
        raise upstream_failure(logger, "redes sociais")

    return SocialLinkListResponse(redesSociais=[SocialLinkOut.model_validate(link) for link in links])


@router.get("/logos", response_model=LogoListResponse)
def list_logos(
    db: Session = Depends(get_db),
    tipo: Optional[str] = Query(None, description="Logo variant"),
    posicao: Optional[str] = Query(None, description="Placement tag"),
):
    """List active logos, optionally by variant and placement"""
    try:
        logos = LogoRepository.get_active(db, tipo=tipo, posicao=posicao)
    except SQLAlchemyError:
        raise upstream_failure(logger, "logos")

    return LogoListResponse(logos=[LogoOut.model_validate(logo) for logo in logos])
