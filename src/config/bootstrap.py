"""
Bootstrap - Monta a fachada para o backend configurado.

Passos:
1. Resolver configuração (argumentos > settings/.env)
2. Preparar o backend (Django: setup + migrate; memory: carregar JSON)
3. Garantir o seed (catálogo canônico; demo quando configurado)

Example:
    from src.config.bootstrap import build_facade

    facade = build_facade(backend="ephemeral")
    facade.list_rooms()
"""

from typing import Optional
from dependency_injector import providers
import logging
import logging.config
import os

from src.config import settings as project_settings
from src.config.container import Container
from src.core.facade.consistency import ConsistencyFacade
from src.core.facade.seeding import SEED_DEFAULT, SEED_DEMO, apply_seed
from src.core.shared.interfaces import EventPublisher

logger = logging.getLogger(__name__)

BACKEND_DJANGO = "django"
BACKEND_MEMORY = "memory"
BACKEND_EPHEMERAL = "ephemeral"
BACKENDS = (BACKEND_DJANGO, BACKEND_MEMORY, BACKEND_EPHEMERAL)


def configure_logging() -> None:
    """Aplica o LOGGING de src.config.settings."""
    logging.config.dictConfig(project_settings.LOGGING)


def setup_django() -> None:
    """Inicializa o Django, se ainda não foi inicializado."""
    import django
    from django.apps import apps

    if apps.ready:
        return

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "src.config.settings")
    project_settings.DATABASE_CONFIG.ensure_directory()
    django.setup()


def migrate_database() -> None:
    """Aplica as migrations pendentes."""
    from django.core.management import call_command

    call_command("migrate", interactive=False, verbosity=0)
    logger.info("Database migrations applied")


def resolve_seed(backend: str, seed: Optional[str] = None) -> str:
    """Seed padrão: 'demo' no backend efêmero, 'default' nos demais."""
    if seed:
        return seed
    return SEED_DEMO if backend == BACKEND_EPHEMERAL else SEED_DEFAULT


def build_container(
    backend: Optional[str] = None,
    seed: Optional[str] = None,
    data_file: Optional[str] = None,
    auto_migrate: Optional[bool] = None,
    event_publisher: Optional[EventPublisher] = None,
) -> Container:
    """
    Cria o container configurado (sem preparar o backend).

    Args:
        backend: 'django' | 'memory' | 'ephemeral' (padrão: CHAMADOS_BACKEND)
        seed: 'default' | 'demo' (padrão: CHAMADOS_SEED ou conforme o backend)
        data_file: Snapshot JSON do backend 'memory' (padrão: CHAMADOS_DATA_FILE)
        auto_migrate: Aplicar migrations no backend 'django'
        event_publisher: Substitui o LoggingEventPublisher

    Raises:
        ValueError: Se o backend não é conhecido
    """
    backend = (backend or project_settings.CHAMADOS_BACKEND).strip().lower()
    if backend not in BACKENDS:
        raise ValueError(f"Backend inválido: {backend!r} (use {', '.join(BACKENDS)})")

    if data_file is None and backend == BACKEND_MEMORY:
        data_file = project_settings.CHAMADOS_DATA_FILE
    if auto_migrate is None:
        auto_migrate = project_settings.CHAMADOS_AUTO_MIGRATE

    container = Container()
    container.config.from_dict({
        "backend": backend,
        "seed": resolve_seed(backend, seed or project_settings.CHAMADOS_SEED),
        "data_file": data_file if backend == BACKEND_MEMORY else None,
        "auto_migrate": bool(auto_migrate),
    })

    if event_publisher is not None:
        container.event_publisher.override(providers.Object(event_publisher))

    return container


def prepare_backend(container: Container) -> None:
    """Prepara o armazenamento antes do primeiro uso."""
    backend = container.config.backend()

    if backend == BACKEND_DJANGO:
        setup_django()
        if container.config.auto_migrate():
            migrate_database()
    elif backend == BACKEND_MEMORY:
        data_file = container.config.data_file()
        if data_file:
            container.memory_database().load_file(data_file)

    logger.info(f"Storage backend ready: {backend}")


def initialize_facade(container: Container) -> ConsistencyFacade:
    """
    Prepara o backend, aplica o seed e retorna a fachada.

    Raises:
        LegacyStatusCatalogError: Se o catálogo está no formato legado
    """
    prepare_backend(container)
    facade = container.facade()
    apply_seed(facade, container.config.seed())
    return facade


def build_facade(
    backend: Optional[str] = None,
    seed: Optional[str] = None,
    data_file: Optional[str] = None,
    auto_migrate: Optional[bool] = None,
    event_publisher: Optional[EventPublisher] = None,
) -> ConsistencyFacade:
    """
    Monta uma fachada isolada, pronta para uso.

    Cada chamada cria um container novo: testes podem montar
    fachadas independentes.
    """
    container = build_container(
        backend=backend,
        seed=seed,
        data_file=data_file,
        auto_migrate=auto_migrate,
        event_publisher=event_publisher,
    )
    return initialize_facade(container)
