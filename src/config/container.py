"""
Dependency Injection Container.

Configura e gerencia as dependências da camada de consistência.
Usa dependency-injector para lazy-loading e seleção do backend.

Padrões:
- Selector: escolhe repositórios e Unit of Work pelo backend
  configurado ('django' | 'memory' | 'ephemeral')
- Singleton: uma instância por container (repositórios, fachada)
- Lazy import: adapters Django só são importados quando escolhidos
"""

from dependency_injector import containers, providers
from typing import Optional


def _memory_unit_of_work(database, data_file, event_publisher):
    """UoW do backend 'memory': com arquivo JSON se configurado."""
    module = __import__(
        'src.adapters.memory.unit_of_work',
        fromlist=['InMemoryUnitOfWork', 'JsonFileUnitOfWork'],
    )
    if data_file:
        return module.JsonFileUnitOfWork(database, data_file, event_publisher=event_publisher)
    return module.InMemoryUnitOfWork(database, event_publisher=event_publisher)


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: backend, seed, data_file, auto_migrate
    - Infrastructure: publisher de eventos, banco em memória
    - Repositories: selecionados pelo backend
    - Unit of Work: selecionado pelo backend
    - Stores + Facade

    Example:
        container = Container()
        container.config.from_dict({'backend': 'ephemeral'})
        facade = container.facade()
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Singleton(
        lambda: __import__(
            'src.adapters.events.publishers',
            fromlist=['LoggingEventPublisher']
        ).LoggingEventPublisher()
    )

    memory_database = providers.Singleton(
        lambda: __import__(
            'src.adapters.memory.database',
            fromlist=['InMemoryDatabase']
        ).InMemoryDatabase()
    )

    # =========================================================================
    # Repositories
    # =========================================================================

    room_repository = providers.Selector(
        config.backend,
        django=providers.Singleton(
            lambda: __import__(
                'src.adapters.django_app.chamados.repositories',
                fromlist=['DjangoRoomRepository']
            ).DjangoRoomRepository()
        ),
        memory=providers.Callable(lambda db: db.rooms, db=memory_database),
        ephemeral=providers.Callable(lambda db: db.rooms, db=memory_database),
    )

    status_repository = providers.Selector(
        config.backend,
        django=providers.Singleton(
            lambda: __import__(
                'src.adapters.django_app.chamados.repositories',
                fromlist=['DjangoStatusRepository']
            ).DjangoStatusRepository()
        ),
        memory=providers.Callable(lambda db: db.statuses, db=memory_database),
        ephemeral=providers.Callable(lambda db: db.statuses, db=memory_database),
    )

    ticket_repository = providers.Selector(
        config.backend,
        django=providers.Singleton(
            lambda: __import__(
                'src.adapters.django_app.chamados.repositories',
                fromlist=['DjangoTicketRepository']
            ).DjangoTicketRepository()
        ),
        memory=providers.Callable(lambda db: db.tickets, db=memory_database),
        ephemeral=providers.Callable(lambda db: db.tickets, db=memory_database),
    )

    # =========================================================================
    # Unit of Work
    # =========================================================================

    unit_of_work = providers.Selector(
        config.backend,
        django=providers.Singleton(
            lambda event_publisher: __import__(
                'src.adapters.django_app.shared.unit_of_work',
                fromlist=['DjangoUnitOfWork']
            ).DjangoUnitOfWork(event_publisher=event_publisher),
            event_publisher=event_publisher,
        ),
        memory=providers.Singleton(
            _memory_unit_of_work,
            database=memory_database,
            data_file=config.data_file,
            event_publisher=event_publisher,
        ),
        ephemeral=providers.Singleton(
            lambda database, event_publisher: __import__(
                'src.adapters.memory.unit_of_work',
                fromlist=['InMemoryUnitOfWork']
            ).InMemoryUnitOfWork(database, event_publisher=event_publisher),
            database=memory_database,
            event_publisher=event_publisher,
        ),
    )

    # =========================================================================
    # Stores + Facade
    # =========================================================================

    room_registry = providers.Singleton(
        lambda repository: __import__(
            'src.core.rooms.registry',
            fromlist=['RoomRegistry']
        ).RoomRegistry(repository),
        repository=room_repository,
    )

    status_catalog = providers.Singleton(
        lambda repository: __import__(
            'src.core.statuses.catalog',
            fromlist=['StatusCatalog']
        ).StatusCatalog(repository),
        repository=status_repository,
    )

    ticket_store = providers.Singleton(
        lambda repository: __import__(
            'src.core.tickets.store',
            fromlist=['TicketStore']
        ).TicketStore(repository),
        repository=ticket_repository,
    )

    facade = providers.Singleton(
        lambda rooms, statuses, tickets, uow: __import__(
            'src.core.facade.consistency',
            fromlist=['ConsistencyFacade']
        ).ConsistencyFacade(rooms=rooms, statuses=statuses, tickets=tickets, uow=uow),
        rooms=room_registry,
        statuses=status_catalog,
        tickets=ticket_store,
        uow=unit_of_work,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None
_facade = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization), configurado a
    partir de src.config.settings.

    Returns:
        Container configurado
    """
    global _container

    if _container is None:
        from src.config.bootstrap import build_container
        _container = build_container()

    return _container


def get_facade():
    """
    Fachada do container global, com backend preparado e seed aplicado.

    Ponto de entrada da camada HTTP.
    """
    global _facade

    if _facade is None:
        from src.config.bootstrap import initialize_facade
        _facade = initialize_facade(get_container())

    return _facade


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container, _facade
    _container = None
    _facade = None
