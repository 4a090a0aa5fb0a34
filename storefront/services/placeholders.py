"""
Placeholder salespeople shown when the real team cannot be loaded, so the
contact flow keeps working.
"""

from typing import List, Optional


_PLACEHOLDER_TEAM = [
    {"id": 1, "nome": "João Silva", "whatsapp": "65999887766", "cargo": "Consultor de Vendas"},
    {"id": 2, "nome": "Maria Santos", "whatsapp": "65998776655", "cargo": "Especialista em Tintas"},
    {"id": 3, "nome": "Carlos Oliveira", "whatsapp": "65997665544", "cargo": "Especialista em Materiais Elétricos"},
    {"id": 4, "nome": "Ana Costa", "whatsapp": "65996554433", "cargo": "Especialista em Ferramentas"},
]


def placeholder_salespeople(loja_id: Optional[int] = None) -> List[dict]:
    """Fixed placeholder team, tagged with the requested store (or store 1)."""
    return [
        {**person, "ativo": True, "loja_id": loja_id if loja_id is not None else 1}
        for person in _PLACEHOLDER_TEAM
    ]
