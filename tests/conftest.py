"""
Configurações globais do Pytest para Gestão de Chamados.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas:
- Django configurado com SQLite em memória (pytest-django)
- Fachada montada sobre o backend em memória
- Publisher de eventos em memória para verificação
"""

import pytest
from pathlib import Path


def pytest_configure(config):
    """Configura Django antes dos testes."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.contenttypes',
                'src.adapters.django_app.chamados',
            ],
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='America/Sao_Paulo',
        )
        django.setup()


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset de singletons entre testes.

    Garante que cada teste inicia com container global limpo.
    """
    from src.config.container import reset_container

    reset_container()
    yield
    reset_container()


@pytest.fixture
def event_publisher():
    """Publisher em memória para verificar eventos publicados."""
    from src.adapters.events.publishers import InMemoryEventPublisher
    return InMemoryEventPublisher()


@pytest.fixture
def memory_database():
    from src.adapters.memory.database import InMemoryDatabase
    return InMemoryDatabase()


@pytest.fixture
def memory_uow(memory_database, event_publisher):
    """Unit of Work em memória ligado ao publisher de teste."""
    from src.adapters.memory.unit_of_work import InMemoryUnitOfWork
    return InMemoryUnitOfWork(memory_database, event_publisher=event_publisher)


@pytest.fixture
def facade(memory_database, memory_uow):
    """Fachada em memória com o catálogo canônico de status."""
    from src.core.facade.consistency import ConsistencyFacade
    from src.core.rooms.registry import RoomRegistry
    from src.core.statuses.catalog import StatusCatalog
    from src.core.tickets.store import TicketStore

    facade = ConsistencyFacade(
        rooms=RoomRegistry(memory_database.rooms),
        statuses=StatusCatalog(memory_database.statuses),
        tickets=TicketStore(memory_database.tickets),
        uow=memory_uow,
    )
    facade.ensure_status_catalog()
    return facade


@pytest.fixture
def room(facade):
    """Sala ativa para os testes de chamados."""
    from src.core.rooms.dtos import CreateRoomInputDTO
    return facade.create_room(CreateRoomInputDTO(name="Lab 1", description="Laboratório"))


@pytest.fixture
def ticket_data(room):
    """Dados válidos para abrir chamado na sala de teste."""
    from src.core.tickets.dtos import CreateTicketInputDTO
    return CreateTicketInputDTO(
        title="Projetor quebrado",
        room_id=room.id,
        description="O projetor da sala não liga desde ontem",
        priority="high",
        requester="Maria",
    )
