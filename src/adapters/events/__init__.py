"""
Publicadores de eventos de domínio.
"""
