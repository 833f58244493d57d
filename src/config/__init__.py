"""
Configuração do projeto Gestão de Chamados.

Módulos:
- settings: Configurações Django e variáveis CHAMADOS_*
- container: Dependency Injection Container
- bootstrap: Montagem da fachada por backend
"""
