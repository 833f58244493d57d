"""
Seeds iniciais da camada de consistência.

- "default": apenas o catálogo de status canônico
- "demo": catálogo + duas salas + dois chamados de exemplo

O seed sempre vem de configuração explícita e só é aplicado
a um armazenamento vazio.
"""

import logging

from src.core.rooms.dtos import CreateRoomInputDTO
from src.core.statuses.entities import IN_PROGRESS_STATUS_ID, OPEN_STATUS_ID
from src.core.tickets.dtos import CreateTicketInputDTO

from .consistency import ConsistencyFacade

logger = logging.getLogger(__name__)

SEED_DEFAULT = "default"
SEED_DEMO = "demo"
SEEDS = (SEED_DEFAULT, SEED_DEMO)


DEMO_ROOMS = (
    CreateRoomInputDTO(name="Sala 101", description="Sala de aula 101"),
    CreateRoomInputDTO(name="Sala 102", description="Sala de aula 102"),
)


def _demo_tickets(room_ids):
    first, second = room_ids
    return (
        CreateTicketInputDTO(
            title="Projetor não funciona",
            room_id=first,
            description="O projetor da sala 101 não está ligando",
            priority="high",
            status_id=OPEN_STATUS_ID,
        ),
        CreateTicketInputDTO(
            title="Ar condicionado com problema",
            room_id=second,
            description="Ar condicionado não está resfriando adequadamente",
            priority="medium",
            status_id=IN_PROGRESS_STATUS_ID,
        ),
    )


def apply_seed(facade: ConsistencyFacade, seed: str = SEED_DEFAULT) -> None:
    """
    Aplica o seed ao armazenamento da fachada.

    O catálogo de status é sempre garantido (e o formato legado
    recusado). Salas e chamados de demonstração só entram quando
    não há nenhuma sala nem chamado.

    Raises:
        ValueError: Se o seed não é conhecido
        LegacyStatusCatalogError: Se o catálogo está no formato legado
    """
    if seed not in SEEDS:
        raise ValueError(f"Seed inválido: {seed!r} (use {', '.join(SEEDS)})")

    facade.ensure_status_catalog()

    if seed != SEED_DEMO:
        return

    if facade.list_rooms() or facade.summary().total:
        return

    room_ids = [facade.create_room(data).id for data in DEMO_ROOMS]
    for data in _demo_tickets(room_ids):
        facade.create_ticket(data)

    logger.info("Demo seed applied: 2 rooms, 2 tickets")
