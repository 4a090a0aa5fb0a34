"""
Site content models: banners, social links and logos.
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from sqlalchemy.sql import func
from storefront.core.database import Base


class Banner(Base):
    """Home page banner"""
    __tablename__ = "banners"

    id = Column(Integer, primary_key=True, index=True)
    titulo = Column(String(255), nullable=False)
    descricao = Column(Text, nullable=True)
    imagem_url = Column(Text, nullable=False)
    link_destino = Column(Text, nullable=True)
    ativo = Column(Boolean, default=True, nullable=False, index=True)
    ordem = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Banner(id={self.id}, titulo='{self.titulo}')>"


class SocialLink(Base):
    """Social network link shown in the footer"""
    __tablename__ = "redes_sociais"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False)
    link = Column(Text, nullable=False)
    icone = Column(String(50), nullable=False)
    ativo = Column(Boolean, default=True, nullable=False, index=True)
    ordem = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<SocialLink(id={self.id}, nome='{self.nome}')>"


class Logo(Base):
    """Brand logo, selected by (tipo, posicao)"""
    __tablename__ = "logos"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False)
    tipo = Column(String(20), nullable=False, index=True)  # "azul", "branca"
    posicao = Column(String(50), nullable=False, index=True)  # "cabecalho", "rodape"
    url = Column(Text, nullable=False)
    ativo = Column(Boolean, default=True, nullable=False, index=True)
    ordem = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Logo(id={self.id}, tipo='{self.tipo}', posicao='{self.posicao}')>"
