#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Prepara o backend (Django: banco + migrations; memory: arquivo JSON)
2. Garante o catálogo de status
3. Migra o catálogo legado de 3 status (opcional, explícito)
4. Cria dados de exemplo (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
    python scripts/quick_setup.py --migrate-legacy-status
    python scripts/quick_setup.py --backend memory --data-file database/chamados.json
"""

import os
import sys
import argparse

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def check_connection() -> bool:
    """Verifica conexão com o banco."""
    from src.adapters.django_app.shared.database import check_database_connection

    print("🔍 Verificando conexão com o banco...")
    result = check_database_connection()
    if result["healthy"]:
        print(f"✅ Conexão OK! ({result['vendor']})")
        return True
    print(f"❌ Erro de conexão: {result['error']}")
    return False


def show_info(facade, backend: str) -> None:
    """Mostra informações do setup."""
    summary = facade.summary()

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Backend: {backend}")
    if backend == "django":
        from django.conf import settings
        print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
        print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Status: {', '.join(s.name for s in facade.list_statuses())}")
    print(f"  Salas: {len(facade.list_rooms())}")
    print(f"  Chamados: {summary.total}")
    print("=" * 60 + "\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--backend',
        choices=['django', 'memory'],
        default=None,
        help='Backend de armazenamento (padrão: CHAMADOS_BACKEND)'
    )
    parser.add_argument(
        '--data-file',
        default=None,
        help='Arquivo JSON do backend memory'
    )
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar salas e chamados de exemplo'
    )
    parser.add_argument(
        '--migrate-legacy-status',
        action='store_true',
        help='Migrar o catálogo antigo de 3 status para o de 4'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    from src.config.bootstrap import build_container, configure_logging, prepare_backend
    from src.core.facade.seeding import SEED_DEFAULT, SEED_DEMO, apply_seed
    from src.core.shared.exceptions import LegacyStatusCatalogError

    configure_logging()

    print("\n" + "=" * 60)
    print("🔧 Gestão de Chamados - Quick Setup")
    print("=" * 60 + "\n")

    container = build_container(
        backend=args.backend,
        seed=SEED_DEMO if args.with_sample_data else SEED_DEFAULT,
        data_file=args.data_file,
        auto_migrate=True,
    )
    backend = container.config.backend()

    if backend == "django":
        from src.config.bootstrap import setup_django
        setup_django()
        if not check_connection():
            print("\n⚠️  Certifique-se de que o banco de dados está acessível.")
            print("   Para usar SQLite, defina: DATABASE_URL=sqlite:///database/chamados.db")
            sys.exit(1)
        if args.check_only:
            return
        print("📦 Executando migrations...")

    prepare_backend(container)
    facade = container.facade()

    if args.migrate_legacy_status:
        migrated = facade.migrate_legacy_status_catalog()
        if migrated:
            print(f"✅ Catálogo legado migrado: '{migrated.name}' adicionado")
        else:
            print("ℹ️  Catálogo de status já está no formato atual")

    try:
        apply_seed(facade, container.config.seed())
    except LegacyStatusCatalogError as e:
        print(f"❌ {e.message}")
        sys.exit(1)

    if args.with_sample_data:
        print("📝 Dados de exemplo garantidos")

    show_info(facade, backend)


if __name__ == '__main__':
    main()
