"""
Testes do backend em memória: Unit of Work e snapshot JSON.
"""

import json
from unittest.mock import patch

import pytest

from src.adapters.events.publishers import InMemoryEventPublisher
from src.adapters.memory.database import InMemoryDatabase
from src.adapters.memory.unit_of_work import InMemoryUnitOfWork, JsonFileUnitOfWork
from src.config.bootstrap import build_facade
from src.core.rooms.dtos import CreateRoomInputDTO
from src.core.rooms.entities import RoomEntity
from src.core.statuses.entities import IN_PROGRESS_STATUS_ID, TERMINAL_STATUS_ID
from src.core.tickets.dtos import CreateTicketInputDTO
from src.core.tickets.events import TicketDeletedEvent


class TestInMemoryUnitOfWork:

    def test_commit_mantem_alteracoes(self, memory_database):
        uow = InMemoryUnitOfWork(memory_database)

        with uow:
            memory_database.rooms.add(RoomEntity.create(name="Lab 1"))

        assert uow.committed
        assert memory_database.rooms.count() == 1

    def test_rollback_em_excecao(self, memory_database):
        """Exceção dentro do bloco deve descartar as alterações."""
        uow = InMemoryUnitOfWork(memory_database)

        with pytest.raises(RuntimeError):
            with uow:
                memory_database.rooms.add(RoomEntity.create(name="Lab 1"))
                raise RuntimeError("falha")

        assert uow.rolled_back
        assert memory_database.rooms.count() == 0
        assert memory_database.rooms.next_id == 2

    def test_eventos_publicados_apos_commit(self, memory_database):
        publisher = InMemoryEventPublisher()
        uow = InMemoryUnitOfWork(memory_database, event_publisher=publisher)

        with uow:
            uow.publish_event(TicketDeletedEvent(aggregate_id=1, room_id=1, status_id=1))
            assert publisher.published_events == []

        assert len(publisher.published_events) == 1
        assert uow.collect_events() == []

    def test_nao_acumula_eventos_entre_commits(self):
        """Commits sucessivos não devem reter eventos no Unit of Work."""
        facade = build_facade(backend="ephemeral")
        ticket = facade.list_tickets()[0]

        for index in range(200):
            status_id = TERMINAL_STATUS_ID if index % 2 == 0 else IN_PROGRESS_STATUS_ID
            facade.update_ticket_status(ticket.id, status_id)

        assert facade.uow.collect_events() == []
        assert not hasattr(facade.uow, "published_events")
        retained = [
            value for value in vars(facade.uow).values()
            if isinstance(value, list) and value
        ]
        assert retained == []

    def test_eventos_descartados_no_rollback(self, memory_database):
        publisher = InMemoryEventPublisher()
        uow = InMemoryUnitOfWork(memory_database, event_publisher=publisher)

        with pytest.raises(RuntimeError):
            with uow:
                uow.publish_event(TicketDeletedEvent(aggregate_id=1, room_id=1, status_id=1))
                raise RuntimeError("falha")

        assert publisher.published_events == []
        assert uow.collect_events() == []


class TestJsonFileUnitOfWork:

    def test_commit_grava_arquivo(self, tmp_path, memory_database):
        path = tmp_path / "dados" / "chamados.json"
        uow = JsonFileUnitOfWork(memory_database, path)

        with uow:
            memory_database.rooms.add(RoomEntity.create(name="Lab 1"))

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["version"] == 1
        assert data["rooms"][0]["name"] == "Lab 1"
        assert data["next_ids"]["rooms"] == 2

    def test_falha_de_gravacao_restaura_estado(self, tmp_path, memory_database):
        path = tmp_path / "chamados.json"
        uow = JsonFileUnitOfWork(memory_database, path)
        with uow:
            memory_database.rooms.add(RoomEntity.create(name="Lab 1"))

        with patch("src.adapters.memory.database.os.replace", side_effect=OSError("sem espaço")):
            with pytest.raises(OSError):
                with uow:
                    memory_database.rooms.add(RoomEntity.create(name="Lab 2"))

        assert [r.name for r in memory_database.rooms.list_all()] == ["Lab 1"]
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert [r["name"] for r in saved["rooms"]] == ["Lab 1"]
        assert [p.name for p in tmp_path.iterdir()] == ["chamados.json"]


class TestSnapshotJson:

    def test_reinicio_preserva_dados_e_ids(self, tmp_path):
        """Dados e contadores de id sobrevivem a uma nova fachada."""
        path = tmp_path / "chamados.json"
        first = build_facade(backend="memory", data_file=str(path), seed="default")

        room = first.create_room(CreateRoomInputDTO(name="Lab 1"))
        first.create_ticket(CreateTicketInputDTO(
            title="Projetor quebrado",
            room_id=room.id,
            description="O projetor da sala não liga desde ontem",
        ))
        removed = first.create_ticket(CreateTicketInputDTO(
            title="Ar condicionado",
            room_id=room.id,
            description="Ar condicionado pingando sobre as mesas",
        ))
        first.delete_ticket(removed.id)

        second = build_facade(backend="memory", data_file=str(path), seed="default")

        assert [r.name for r in second.list_rooms()] == ["Lab 1"]
        assert [t.title for t in second.list_tickets()] == ["Projetor quebrado"]
        assert len(second.list_statuses()) == 4
        third = second.create_ticket(CreateTicketInputDTO(
            title="Lâmpada queimada",
            room_id=room.id,
            description="Duas lâmpadas queimadas no fundo da sala",
        ))
        assert third.id == 3

    def test_datas_preservadas(self, tmp_path):
        path = tmp_path / "chamados.json"
        facade = build_facade(backend="memory", data_file=str(path), seed="default")
        room = facade.create_room(CreateRoomInputDTO(name="Lab 1"))
        ticket = facade.create_ticket(CreateTicketInputDTO(
            title="Projetor quebrado",
            room_id=room.id,
            description="O projetor da sala não liga desde ontem",
        ))
        closed = facade.update_ticket_status(ticket.id, TERMINAL_STATUS_ID)

        database = InMemoryDatabase()
        assert database.load_file(path)

        stored = database.tickets.get_by_id(ticket.id)
        assert stored.closed_at == closed.closed_at
        assert stored.created_at == closed.created_at
        assert database.rooms.get_by_id(room.id).qr_token == room.qr_token

    def test_arquivo_inexistente(self, tmp_path):
        database = InMemoryDatabase()

        assert database.load_file(tmp_path / "nao-existe.json") is False
        assert database.is_empty()
