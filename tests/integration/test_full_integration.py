"""
Testes de Integração Completa.

Executa os mesmos cenários sobre os três backends
(django, memory com arquivo JSON e ephemeral), garantindo que
as regras de consistência são as mesmas em todos.
"""

import pytest

from src.config.bootstrap import build_facade
from src.core.rooms.dtos import CreateRoomInputDTO
from src.core.shared.exceptions import DuplicateNameError, ReferentialConflictError
from src.core.statuses.entities import (
    IN_PROGRESS_STATUS_ID,
    OPEN_STATUS_ID,
    TERMINAL_STATUS_ID,
)
from src.core.tickets.dtos import CreateTicketInputDTO


BACKENDS = ["django", "memory", "ephemeral"]


@pytest.fixture(params=BACKENDS)
def any_facade(request, tmp_path):
    """Fachada limpa (somente catálogo de status) em cada backend."""
    if request.param == "django":
        request.getfixturevalue("db")
        return build_facade(backend="django", seed="default", auto_migrate=False)
    if request.param == "memory":
        return build_facade(
            backend="memory",
            seed="default",
            data_file=str(tmp_path / "chamados.json"),
        )
    return build_facade(backend="ephemeral", seed="default")


def open_ticket(facade, room_id):
    return facade.create_ticket(CreateTicketInputDTO(
        title="Projector broken",
        room_id=room_id,
        description="Ten+ chars here",
    ))


@pytest.mark.integration
class TestCenariosEmTodosOsBackends:

    def test_chamado_novo_aberto(self, any_facade):
        lab = any_facade.create_room(CreateRoomInputDTO(name="Lab 1"))

        ticket = open_ticket(any_facade, lab.id)

        assert ticket.status_id == OPEN_STATUS_ID
        assert ticket.closed_at is None

    def test_concluir_e_reabrir(self, any_facade):
        lab = any_facade.create_room(CreateRoomInputDTO(name="Lab 1"))
        ticket = open_ticket(any_facade, lab.id)

        assert any_facade.update_ticket_status(ticket.id, TERMINAL_STATUS_ID).closed_at is not None
        assert any_facade.update_ticket_status(ticket.id, IN_PROGRESS_STATUS_ID).closed_at is None

    def test_sala_duplicada(self, any_facade):
        any_facade.create_room(CreateRoomInputDTO(name="Lab"))

        with pytest.raises(DuplicateNameError):
            any_facade.create_room(CreateRoomInputDTO(name="lAB"))

        assert len(any_facade.list_rooms()) == 1

    def test_exclusao_de_sala_com_chamado(self, any_facade):
        room = any_facade.create_room(CreateRoomInputDTO(name="Lab 1"))
        ticket = open_ticket(any_facade, room.id)

        with pytest.raises(ReferentialConflictError) as exc_info:
            any_facade.delete_room(room.id)
        assert exc_info.value.count == 1

        any_facade.delete_ticket(ticket.id)
        any_facade.delete_room(room.id)

        assert any_facade.list_rooms() == []

    def test_listagem_e_resumo(self, any_facade):
        room = any_facade.create_room(CreateRoomInputDTO(name="Lab 1"))
        first = open_ticket(any_facade, room.id)
        second = open_ticket(any_facade, room.id)
        any_facade.update_ticket_status(first.id, TERMINAL_STATUS_ID)

        assert [t.id for t in any_facade.list_tickets()] == [second.id, first.id]
        assert any_facade.get_room(room.id).chamados_abertos == 1

        summary = any_facade.summary()
        assert summary.total == 2
        assert summary.by_status[TERMINAL_STATUS_ID] == 1
        assert summary.by_status[OPEN_STATUS_ID] == 1
