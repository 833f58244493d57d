"""
Core Domain Layer - O Hexágono.

Este pacote contém a camada de consistência de chamados, salas e
status, sem dependências de frameworks.
Características:
- Zero dependências externas (Django, etc.)
- 100% testável sem banco de dados
- Agnóstico ao backend de armazenamento (relacional, memória, efêmero)
"""
