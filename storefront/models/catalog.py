"""
Category, Subcategory and Product models.
Read-only projections of the catalog tables owned by the hosted backend.
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from storefront.core.database import Base


PRODUCT_ACTIVE_STATUS = "ativo"


class Category(Base):
    """Top-level catalog category"""
    __tablename__ = "categorias"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(255), nullable=False)
    descricao = Column(Text, nullable=True)
    slug = Column(String(255), nullable=True)
    imagem_url = Column(Text, nullable=True)
    ativo = Column(Boolean, default=True, nullable=False, index=True)
    ordem = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    # Relationships
    subcategorias = relationship("Subcategory", back_populates="categoria")

    def __repr__(self):
        return f"<Category(id={self.id}, nome='{self.nome}')>"


class Subcategory(Base):
    """Subcategory - every product references exactly one"""
    __tablename__ = "subcategorias"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(255), nullable=False)
    descricao = Column(Text, nullable=True)
    slug = Column(String(255), nullable=True)
    imagem_url = Column(Text, nullable=True)
    categoria_id = Column(Integer, ForeignKey("categorias.id"), nullable=False, index=True)
    ativo = Column(Boolean, default=True, nullable=False, index=True)
    ordem = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    # Relationships
    categoria = relationship("Category", back_populates="subcategorias")
    produtos = relationship("Product", back_populates="subcategoria")

    def __repr__(self):
        return f"<Subcategory(id={self.id}, nome='{self.nome}', categoria_id={self.categoria_id})>"


class Product(Base):
    """Product model - sale price, when present, is below the list price"""
    __tablename__ = "produtos"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(255), nullable=False)
    descricao = Column(Text, nullable=True)
    preco = Column(Numeric(12, 2), nullable=False)

    # Promotion
    promocao_mes = Column(Boolean, default=False, nullable=False, index=True)
    preco_promocao = Column(Numeric(12, 2), nullable=True)
    promocao_data_inicio = Column(DateTime(timezone=True), nullable=True)
    promocao_data_fim = Column(DateTime(timezone=True), nullable=True)

    # Flags
    novidade = Column(Boolean, default=False, nullable=False, index=True)
    tipo_tinta = Column(Boolean, default=False, nullable=False, index=True)
    cor_rgb = Column(String(50), nullable=True)
    tipo_eletrico = Column(Boolean, default=False, nullable=False, index=True)
    voltagem = Column(String(50), nullable=True)

    status = Column(String(20), default=PRODUCT_ACTIVE_STATUS, nullable=False, index=True)
    ordem = Column(Integer, nullable=True)

    # Images (storage paths or absolute URLs)
    imagem_principal = Column(Text, nullable=True)
    imagem_2 = Column(Text, nullable=True)
    imagem_3 = Column(Text, nullable=True)
    imagem_4 = Column(Text, nullable=True)
    imagem_principal_index = Column(Integer, nullable=True)

    subcategoria_id = Column(Integer, ForeignKey("subcategorias.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    # Relationships
    subcategoria = relationship("Subcategory", back_populates="produtos")

    def __repr__(self):
        return f"<Product(id={self.id}, nome='{self.nome}')>"
