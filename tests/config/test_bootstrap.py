"""
Testes da montagem da fachada (bootstrap + container).
"""

import pytest

from src.adapters.memory.unit_of_work import InMemoryUnitOfWork, JsonFileUnitOfWork
from src.config.bootstrap import build_container, build_facade, resolve_seed
from src.core.facade.seeding import SEED_DEFAULT, SEED_DEMO, apply_seed
from src.core.rooms.dtos import CreateRoomInputDTO
from src.core.shared.exceptions import LegacyStatusCatalogError
from src.core.statuses.entities import IN_PROGRESS_STATUS_ID, OPEN_STATUS_ID, StatusEntity


class TestResolveSeed:

    def test_padrao_por_backend(self):
        assert resolve_seed("ephemeral") == SEED_DEMO
        assert resolve_seed("memory") == SEED_DEFAULT
        assert resolve_seed("django") == SEED_DEFAULT

    def test_seed_explicito(self):
        assert resolve_seed("ephemeral", SEED_DEFAULT) == SEED_DEFAULT


class TestBuildContainer:

    def test_backend_invalido_erro(self):
        with pytest.raises(ValueError):
            build_container(backend="redis")

    def test_selector_efemero(self):
        container = build_container(backend="ephemeral")

        assert isinstance(container.unit_of_work(), InMemoryUnitOfWork)
        assert container.room_repository() is container.memory_database().rooms
        assert container.config.data_file() is None

    def test_selector_memory_com_arquivo(self, tmp_path):
        container = build_container(backend="memory", data_file=str(tmp_path / "dados.json"))

        assert isinstance(container.unit_of_work(), JsonFileUnitOfWork)

    def test_fachada_singleton(self):
        container = build_container(backend="ephemeral")

        assert container.facade() is container.facade()


class TestSeeds:

    def test_efemero_com_demo(self):
        """Backend efêmero deve iniciar com salas e chamados de exemplo."""
        facade = build_facade(backend="ephemeral")

        assert [r.name for r in facade.list_rooms()] == ["Sala 101", "Sala 102"]
        tickets = facade.list_tickets()
        assert [t.title for t in tickets] == [
            "Ar condicionado com problema",
            "Projetor não funciona",
        ]
        assert tickets[0].status_id == IN_PROGRESS_STATUS_ID
        assert tickets[1].status_id == OPEN_STATUS_ID
        assert tickets[1].priority == "high"

    def test_instancias_efemeras_isoladas(self):
        """Cada fachada efêmera tem o próprio armazenamento."""
        first = build_facade(backend="ephemeral", seed=SEED_DEFAULT)
        second = build_facade(backend="ephemeral", seed=SEED_DEFAULT)

        first.create_room(CreateRoomInputDTO(name="Lab 1"))

        assert second.list_rooms() == []

    def test_seed_default_somente_status(self):
        facade = build_facade(backend="ephemeral", seed=SEED_DEFAULT)

        assert len(facade.list_statuses()) == 4
        assert facade.list_rooms() == []

    def test_demo_nao_duplica(self):
        facade = build_facade(backend="ephemeral")

        apply_seed(facade, SEED_DEMO)

        assert len(facade.list_rooms()) == 2
        assert facade.summary().total == 2

    def test_demo_ignorado_com_dados(self):
        """Demo não deve ser aplicado se já existem salas."""
        facade = build_facade(backend="ephemeral", seed=SEED_DEFAULT)
        facade.create_room(CreateRoomInputDTO(name="Lab 1"))

        apply_seed(facade, SEED_DEMO)

        assert [r.name for r in facade.list_rooms()] == ["Lab 1"]

    def test_seed_invalido_erro(self):
        facade = build_facade(backend="ephemeral", seed=SEED_DEFAULT)

        with pytest.raises(ValueError):
            apply_seed(facade, "completo")

    def test_catalogo_legado_no_arquivo(self, tmp_path):
        """Snapshot com catálogo legado deve ser recusado ao iniciar."""
        path = tmp_path / "chamados.json"
        container = build_container(backend="memory", data_file=str(path))
        database = container.memory_database()
        for index, name in enumerate(("Aberto", "Em Andamento", "Finalizado"), start=1):
            database.statuses.add(StatusEntity.create(name=name, status_id=index))
        database.save_file(path)

        with pytest.raises(LegacyStatusCatalogError):
            build_facade(backend="memory", data_file=str(path), seed=SEED_DEFAULT)


class TestContainerGlobal:

    def test_get_facade_usa_settings(self, monkeypatch):
        from src.config import container as container_module
        from src.config import settings

        monkeypatch.setattr(settings, "CHAMADOS_BACKEND", "ephemeral")
        monkeypatch.setattr(settings, "CHAMADOS_SEED", None)

        facade = container_module.get_facade()

        assert facade is container_module.get_facade()
        assert len(facade.list_rooms()) == 2

        container_module.reset_container()
        assert container_module.get_facade() is not facade
