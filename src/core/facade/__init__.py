"""
Facade - Driving Port da camada de consistência.
"""

from .consistency import ConsistencyFacade

__all__ = ["ConsistencyFacade"]
