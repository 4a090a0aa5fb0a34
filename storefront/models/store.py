"""
Store (loja) and Salesperson (vendedor) models.
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from storefront.core.database import Base


STORE_ACTIVE_STATUS = "ativa"

# text[] on the hosted Postgres, JSON everywhere else
PhoneList = JSON().with_variant(postgresql.ARRAY(String), "postgresql")


class Store(Base):
    """Physical store"""
    __tablename__ = "lojas"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(255), nullable=False)
    endereco = Column(Text, nullable=False)
    horario_funcionamento = Column(Text, nullable=False)
    status = Column(String(20), default=STORE_ACTIVE_STATUS, nullable=False, index=True)
    ordem = Column(Integer, nullable=True)
    telefones = Column(PhoneList, nullable=True)
    imagem_principal = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    # Relationships
    vendedores = relationship("Salesperson", back_populates="loja")

    def __repr__(self):
        return f"<Store(id={self.id}, nome='{self.nome}')>"


class Salesperson(Base):
    """Salesperson reachable through a messaging handle"""
    __tablename__ = "vendedores"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(255), nullable=False)
    whatsapp = Column(String(30), nullable=False)  # used verbatim in the chat deep link
    cargo = Column(String(255), nullable=True)
    foto_url = Column(Text, nullable=True)
    loja_id = Column(Integer, ForeignKey("lojas.id"), nullable=False, index=True)
    ativo = Column(Boolean, default=True, nullable=False, index=True)
    ordem = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    loja = relationship("Store", back_populates="vendedores")

    def __repr__(self):
        return f"<Salesperson(id={self.id}, nome='{self.nome}', loja_id={self.loja_id})>"
