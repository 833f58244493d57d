"""
Adapters Layer - Implementações dos Ports do Core.
"""
