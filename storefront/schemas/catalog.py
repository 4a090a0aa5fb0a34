"""
Pydantic schemas for Category, Subcategory and Product.
Used by the API to serialize ORM rows and by the client to parse responses.
"""

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

from storefront.schemas.common import Pagination


# ============================================================================
# Nested references
# ============================================================================

class CategoryRef(BaseModel):
    """Parent category inlined in subcategory and product payloads"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    descricao: Optional[str] = None


class SubcategoryRef(BaseModel):
    """Subcategory inlined in product payloads"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    descricao: Optional[str] = None
    categoria: Optional[CategoryRef] = None


# ============================================================================
# Category / Subcategory
# ============================================================================

class SubcategoryItem(BaseModel):
    """Subcategory as listed under its category"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    descricao: Optional[str] = None
    ativo: bool = True
    ordem: Optional[int] = None


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    descricao: Optional[str] = None
    slug: Optional[str] = None
    imagem_url: Optional[str] = None
    ativo: bool = True
    ordem: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CategoryWithSubcategoriesOut(CategoryOut):
    """Category with its active subcategories, sorted by display order"""
    subcategorias: Optional[List[SubcategoryItem]] = None


class SubcategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    descricao: Optional[str] = None
    slug: Optional[str] = None
    imagem_url: Optional[str] = None
    categoria_id: Optional[int] = None
    ativo: bool = True
    ordem: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    categoria: Optional[CategoryRef] = None


# ============================================================================
# Product
# ============================================================================

class ProductOut(BaseModel):
    """Product row with its subcategory and category inlined"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    descricao: Optional[str] = None
    preco: float = Field(..., description="List price")
    promocao_mes: bool = False
    preco_promocao: Optional[float] = Field(None, description="Sale price, below the list price")
    promocao_data_inicio: Optional[datetime] = None
    promocao_data_fim: Optional[datetime] = None
    novidade: bool = False
    tipo_tinta: bool = False
    cor_rgb: Optional[str] = None
    tipo_eletrico: bool = False
    voltagem: Optional[str] = None
    status: Optional[str] = None
    ordem: Optional[int] = None
    imagem_principal: Optional[str] = None
    imagem_2: Optional[str] = None
    imagem_3: Optional[str] = None
    imagem_4: Optional[str] = None
    imagem_principal_index: Optional[int] = None
    subcategoria_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    subcategoria: Optional[SubcategoryRef] = None

    @property
    def on_sale(self) -> bool:
        """Sale flag set and a sale price present"""
        return bool(self.promocao_mes and self.preco_promocao is not None)


# ============================================================================
# Envelopes
# ============================================================================

class ProductListResponse(BaseModel):
    produtos: List[ProductOut]
    pagination: Pagination


class ProductDetailResponse(BaseModel):
    produto: ProductOut


class CategoryListResponse(BaseModel):
    categorias: List[CategoryWithSubcategoriesOut]


class CategoryDetailResponse(BaseModel):
    categoria: CategoryOut


class SubcategoryListResponse(BaseModel):
    subcategorias: List[SubcategoryOut]
    total: int


class SubcategoryDetailResponse(BaseModel):
    subcategoria: SubcategoryOut
