"""
Repository layer for banners, social links and logos.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from storefront.models.site import Banner, SocialLink, Logo


class BannerRepository:
    """Repository for Banner queries"""

    @staticmethod
    def get_all(db: Session, ativo: bool = True) -> List[Banner]:
        return db.query(Banner)\
            .filter(Banner.ativo.is_(ativo))\
            .order_by(Banner.ordem.asc().nulls_last(), Banner.created_at.desc())\
            .all()


class SocialLinkRepository:
    """Repository for SocialLink queries"""

    @staticmethod
    def get_active(db: Session) -> List[SocialLink]:
        return db.query(SocialLink)\
            .filter(SocialLink.ativo.is_(True))\
            .order_by(SocialLink.ordem.asc().nulls_last(), SocialLink.created_at.desc())\
            .all()


class LogoRepository:
    """Repository for Logo queries"""

    @staticmethod
    def get_active(db: Session, tipo: Optional[str] = None, posicao: Optional[str] = None) -> List[Logo]:
        """Active logos, optionally narrowed to one variant and placement"""
        query = db.query(Logo).filter(Logo.ativo.is_(True))

        if tipo:
            query = query.filter(Logo.tipo == tipo)
        if posicao:
            query = query.filter(Logo.posicao == posicao)

        return query.order_by(Logo.ordem.asc().nulls_last(), Logo.created_at.desc()).all()
