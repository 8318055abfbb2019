"""
Domain Helpers - Funções utilitárias para cálculos de domínio
"""
from domain.helpers.rounding import round_half_away, round_int, format_number

__all__ = ['round_half_away', 'round_int', 'format_number']
