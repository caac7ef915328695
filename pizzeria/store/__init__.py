"""
Store Package

Persistence collaborator and its result types.
"""

from pizzeria.store.result import Err, Ok, StoreFailure
from pizzeria.store.store import Store

__all__ = ['Store', 'Ok', 'Err', 'StoreFailure']
