"""
Repository layer for Category, Subcategory and Product queries.
Every query is read-only and restricted to active rows.
"""

from typing import List, Optional, Tuple
from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from storefront.models.catalog import Category, Subcategory, Product, PRODUCT_ACTIVE_STATUS


DEFAULT_PAGE_SIZE = 12


def parse_id_list(raw: Optional[str]) -> List[int]:
    """Parse a comma-separated id list, skipping entries that are not integers."""
    if not raw:
        return []
    ids = []
    for part in raw.split(","):
        part = part.strip()
        try:
            ids.append(int(part))
        except ValueError:
            continue
    return ids


def contains_pattern(text: str) -> str:
    """LIKE pattern matching ``text`` anywhere, with wildcards in it taken literally."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class CategoryRepository:
    """Repository for Category queries"""

    @staticmethod
    def _active(db: Session):
        return db.query(Category).filter(Category.ativo.is_(True))

    @staticmethod
    def get_all(db: Session) -> List[Category]:
        """Active categories by display order, newest first on ties"""
        return CategoryRepository._active(db)\
            .order_by(Category.ordem.asc().nulls_last(), Category.created_at.desc())\
            .all()

    @staticmethod
    def get_all_with_subcategories(db: Session) -> List[Tuple[Category, List[Subcategory]]]:
        """Active categories paired with their active subcategories"""
        categories = CategoryRepository.get_all(db)
        if not categories:
            return []

        subcategories = db.query(Subcategory)\
            .filter(
                Subcategory.categoria_id.in_([c.id for c in categories]),
                Subcategory.ativo.is_(True),
            )\
            .order_by(Subcategory.ordem.asc().nulls_last(), Subcategory.nome.asc())\
            .all()

        grouped = {c.id: [] for c in categories}
        for sub in subcategories:
            grouped[sub.categoria_id].append(sub)

        return [(c, grouped[c.id]) for c in categories]

    @staticmethod
    def get_by_id(db: Session, categoria_id: int) -> Optional[Category]:
        """Get an active category by ID"""
        return CategoryRepository._active(db).filter(Category.id == categoria_id).first()

    @staticmethod
    def get_active_subcategory_ids(db: Session, categoria_id: int) -> List[int]:
        """IDs of the active subcategories of a category"""
        rows = db.query(Subcategory.id)\
            .filter(Subcategory.categoria_id == categoria_id, Subcategory.ativo.is_(True))\
            .all()
        return [r[0] for r in rows]


class SubcategoryRepository:
    """Repository for Subcategory queries"""

    @staticmethod
    def get_all(db: Session, categoria_id: Optional[int] = None) -> List[Subcategory]:
        """Active subcategories with the parent category loaded"""
        query = db.query(Subcategory)\
            .options(joinedload(Subcategory.categoria))\
            .filter(Subcategory.ativo.is_(True))

        if categoria_id is not None:
            query = query.filter(Subcategory.categoria_id == categoria_id)

        return query.order_by(Subcategory.ordem.asc().nulls_last(), Subcategory.nome.asc()).all()

    @staticmethod
    def get_by_id(db: Session, subcategoria_id: int) -> Optional[Subcategory]:
        """Get an active subcategory by ID"""
        return db.query(Subcategory)\
            .options(joinedload(Subcategory.categoria))\
            .filter(Subcategory.id == subcategoria_id, Subcategory.ativo.is_(True))\
            .first()


class ProductRepository:
    """Repository for Product queries"""

    @staticmethod
    def get_all(
        db: Session,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        categoria_id: Optional[int] = None,
        subcategoria_id: Optional[int] = None,
        subcategoria_ids: Optional[List[int]] = None,
        promocao: bool = False,
        novidade: bool = False,
        tipo_tinta: bool = False,
        tipo_eletrico: bool = False,
        status: str = PRODUCT_ACTIVE_STATUS,
        busca: Optional[str] = None,
    ) -> Tuple[List[Product], int]:
        """
        Get one page of products matching the filters.

        A category is resolved to its active subcategories only when no
        subcategory filter is given. Returns the page and the total number of
        matching rows.
        """
        query = db.query(Product).filter(Product.status == status)

        # Flag filters
        if promocao:
            query = query.filter(Product.promocao_mes.is_(True))
        if novidade:
            query = query.filter(Product.novidade.is_(True))
        if tipo_tinta:
            query = query.filter(Product.tipo_tinta.is_(True))
        if tipo_eletrico:
            query = query.filter(Product.tipo_eletrico.is_(True))

        if busca:
            pattern = contains_pattern(busca)
            query = query.filter(or_(
                Product.nome.ilike(pattern, escape="\\"),
                Product.descricao.ilike(pattern, escape="\\"),
            ))

        # Subcategory / category scope
        if subcategoria_id is not None:
            query = query.filter(Product.subcategoria_id == subcategoria_id)
        elif subcategoria_ids:
            query = query.filter(Product.subcategoria_id.in_(subcategoria_ids))
        elif categoria_id is not None:
            scope = CategoryRepository.get_active_subcategory_ids(db, categoria_id)
            if not scope:
                return [], 0
            query = query.filter(Product.subcategoria_id.in_(scope))

        total = query.count()

        offset = (page - 1) * limit
        products = query\
            .options(joinedload(Product.subcategoria).joinedload(Subcategory.categoria))\
            .order_by(Product.ordem.asc().nulls_last(), Product.created_at.desc(), Product.id.desc())\
            .offset(offset).limit(limit).all()

        return products, total

    @staticmethod
    def get_by_id(db: Session, produto_id: int) -> Optional[Product]:
        """Get an active product with its subcategory and category"""
        return db.query(Product)\
            .options(joinedload(Product.subcategoria).joinedload(Subcategory.categoria))\
            .filter(Product.id == produto_id, Product.status == PRODUCT_ACTIVE_STATUS)\
            .first()
