"""
Repository layer for stores (lojas) and salespeople (vendedores).
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from storefront.models.store import Store, Salesperson, STORE_ACTIVE_STATUS


class StoreRepository:
    """Repository for Store queries"""

    @staticmethod
    def get_active(db: Session) -> List[Store]:
        """Active stores by display order, newest first on ties"""
        return db.query(Store)\
            .filter(Store.status == STORE_ACTIVE_STATUS)\
            .order_by(Store.ordem.asc().nulls_last(), Store.created_at.desc())\
            .all()


class SalespersonRepository:
    """Repository for Salesperson queries"""

    @staticmethod
    def get_active(db: Session, loja_id: Optional[int] = None) -> List[Salesperson]:
        """Active salespeople sorted by name, optionally for one store"""
        query = db.query(Salesperson).filter(Salesperson.ativo.is_(True))

        if loja_id is not None:
            query = query.filter(Salesperson.loja_id == loja_id)

        return query.order_by(Salesperson.nome.asc()).all()
