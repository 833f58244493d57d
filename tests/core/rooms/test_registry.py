"""
Testes Unitários para o Registro de Salas.
"""

import pytest

from src.core.rooms.dtos import CreateRoomInputDTO, RoomOutputDTO, UpdateRoomInputDTO
from src.core.rooms.ports import InMemoryRoomRepository
from src.core.rooms.registry import RoomRegistry
from src.core.shared.exceptions import (
    DuplicateNameError,
    EntityNotFoundError,
    ValidationError,
)


@pytest.fixture
def registry():
    return RoomRegistry(InMemoryRoomRepository())


class TestRoomRegistryCriacao:

    def test_criar_sala(self, registry):
        """Deve criar sala ativa com token de QR Code."""
        room = registry.create(CreateRoomInputDTO(name=" Sala 101 ", description="Sala de aula"))

        assert room.id == 1
        assert room.name == "Sala 101"
        assert room.description == "Sala de aula"
        assert room.active is True
        assert room.qr_token

    def test_tokens_distintos(self, registry):
        """Cada sala deve receber um token diferente."""
        first = registry.create(CreateRoomInputDTO(name="Sala 101"))
        second = registry.create(CreateRoomInputDTO(name="Sala 102"))

        assert first.qr_token != second.qr_token

    @pytest.mark.parametrize("name", ["", "A", "x" * 101])
    def test_nome_invalido_erro(self, registry, name):
        """Deve rejeitar nome fora de 2 a 100 caracteres."""
        with pytest.raises(ValidationError) as exc_info:
            registry.create(CreateRoomInputDTO(name=name))

        assert exc_info.value.field == "name"

    def test_descricao_longa_erro(self, registry):
        """Deve rejeitar descrição acima de 500 caracteres."""
        with pytest.raises(ValidationError):
            registry.create(CreateRoomInputDTO(name="Sala 101", description="x" * 501))

    def test_nome_duplicado_erro(self, registry):
        """Deve rejeitar nome repetido sem diferenciar maiúsculas."""
        registry.create(CreateRoomInputDTO(name="Lab A"))

        with pytest.raises(DuplicateNameError) as exc_info:
            registry.create(CreateRoomInputDTO(name="lab a"))

        assert exc_info.value.http_status == 409


class TestRoomRegistryConsultas:

    def test_buscar_por_nome(self, registry):
        """Deve encontrar a sala pelo nome sem diferenciar maiúsculas."""
        created = registry.create(CreateRoomInputDTO(name="Sala 101"))

        assert registry.get_by_name("SALA 101").id == created.id

    def test_buscar_por_token(self, registry):
        """Deve resolver a sala pelo token do QR Code."""
        created = registry.create(CreateRoomInputDTO(name="Sala 101"))

        assert registry.get_by_qr_token(created.qr_token).id == created.id

    def test_token_invalido_erro(self, registry):
        with pytest.raises(EntityNotFoundError) as exc_info:
            registry.get_by_qr_token("nao-existe")

        assert exc_info.value.message == "QR Code inválido ou sala não encontrada"

    def test_regenerar_token_invalida_anterior(self, registry):
        """O token anterior não deve mais resolver a sala."""
        created = registry.create(CreateRoomInputDTO(name="Sala 101"))

        updated = registry.regenerate_qr_token(created.id)

        assert updated.qr_token != created.qr_token
        assert registry.get_by_qr_token(updated.qr_token).id == created.id
        with pytest.raises(EntityNotFoundError):
            registry.get_by_qr_token(created.qr_token)


class TestRoomRegistryAlteracao:

    def test_update_parcial(self, registry):
        """Deve alterar somente os campos informados."""
        created = registry.create(CreateRoomInputDTO(name="Sala 101", description="Térreo"))

        updated = registry.update(created.id, UpdateRoomInputDTO(active=False))

        assert updated.active is False
        assert updated.name == "Sala 101"
        assert updated.description == "Térreo"
        assert updated.qr_token == created.qr_token

    def test_update_descricao_vazia_limpa(self, registry):
        created = registry.create(CreateRoomInputDTO(name="Sala 101", description="Térreo"))

        updated = registry.update(created.id, UpdateRoomInputDTO(description=""))

        assert updated.description == ""

    def test_update_nome_de_outra_sala_erro(self, registry):
        registry.create(CreateRoomInputDTO(name="Sala 101"))
        second = registry.create(CreateRoomInputDTO(name="Sala 102"))

        with pytest.raises(DuplicateNameError):
            registry.update(second.id, UpdateRoomInputDTO(name="sala 101"))

    def test_update_inexistente_erro(self, registry):
        with pytest.raises(EntityNotFoundError) as exc_info:
            registry.update(42, UpdateRoomInputDTO(name="Sala 999"))

        assert exc_info.value.message == "Sala não encontrada"

    def test_output_dto(self, registry):
        """Deve serializar a sala com o contador de chamados abertos."""
        created = registry.create(CreateRoomInputDTO(name="Sala 101"))

        data = RoomOutputDTO.from_entity(created, open_tickets=2).to_dict()

        assert data["name"] == "Sala 101"
        assert data["chamados_abertos"] == 2
