"""
Knowledge Base Module
=====================

Guideline knowledge: the fixed category -> follow-up recommendation table.
"""

from .fleischner import RECOMMENDATIONS, get_recommendation

__all__ = ['RECOMMENDATIONS', 'get_recommendation']
