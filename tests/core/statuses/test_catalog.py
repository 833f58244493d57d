"""
Testes Unitários para o Catálogo de Status.

Coverage:
- Seed canônico de 4 entradas
- Unicidade de nome sem diferenciar maiúsculas
- Detecção e migração do catálogo legado
"""

import pytest

from src.core.shared.exceptions import (
    DuplicateNameError,
    EntityNotFoundError,
    LegacyStatusCatalogError,
    ValidationError,
)
from src.core.statuses.catalog import StatusCatalog
from src.core.statuses.dtos import CreateStatusInputDTO, UpdateStatusInputDTO
from src.core.statuses.entities import (
    CANCELLED_STATUS_ID,
    DEFAULT_COLOR,
    StatusEntity,
)
from src.core.statuses.ports import InMemoryStatusRepository


@pytest.fixture
def catalog():
    return StatusCatalog(InMemoryStatusRepository())


@pytest.fixture
def legacy_catalog(catalog):
    for index, name in enumerate(("Aberto", "Em Andamento", "Finalizado"), start=1):
        catalog.repository.add(StatusEntity.create(name=name, color="#cccccc", status_id=index))
    return catalog


class TestStatusCatalogSeed:

    def test_seed_catalogo_vazio(self, catalog):
        """Deve criar os 4 status canônicos em catálogo vazio."""
        catalog.ensure_seeded()

        statuses = catalog.list()
        assert [(s.id, s.name, s.color) for s in statuses] == [
            (1, "Aberto", "#ff6b6b"),
            (2, "Em Andamento", "#feca57"),
            (3, "Concluído", "#48dbfb"),
            (4, "Cancelado", "#ff9ff3"),
        ]
        assert all(s.active for s in statuses)

    def test_seed_idempotente(self, catalog):
        """Não deve duplicar entradas ao garantir o seed duas vezes."""
        catalog.ensure_seeded()
        catalog.ensure_seeded()

        assert catalog.repository.count() == 4

    def test_proximo_id_apos_seed(self, catalog):
        """Status novo deve receber id 5 após o seed."""
        catalog.ensure_seeded()

        created = catalog.create(CreateStatusInputDTO(name="Aguardando peça"))

        assert created.id == 5

    def test_catalogo_legado_recusado(self, legacy_catalog):
        """Deve recusar o catálogo legado até a migração explícita."""
        with pytest.raises(LegacyStatusCatalogError):
            legacy_catalog.ensure_seeded()

    def test_catalogo_personalizado_aceito(self, catalog):
        """Catálogo não vazio e não legado deve ser mantido como está."""
        catalog.create(CreateStatusInputDTO(name="Novo"))

        catalog.ensure_seeded()

        assert [s.name for s in catalog.list()] == ["Novo"]


class TestStatusCatalogMigracao:

    def test_migrar_catalogo_legado(self, legacy_catalog):
        """Deve normalizar cores e adicionar Cancelado mantendo nomes."""
        created = legacy_catalog.migrate_legacy_catalog()

        assert created.id == CANCELLED_STATUS_ID
        assert created.name == "Cancelado"
        statuses = legacy_catalog.list()
        assert [s.name for s in statuses] == ["Aberto", "Em Andamento", "Finalizado", "Cancelado"]
        assert statuses[2].color == "#48dbfb"
        assert not legacy_catalog.is_legacy()

    def test_migrar_catalogo_atual_nao_faz_nada(self, catalog):
        """Não deve alterar catálogo que já está no formato atual."""
        catalog.ensure_seeded()

        assert catalog.migrate_legacy_catalog() is None
        assert catalog.repository.count() == 4


class TestStatusCatalogCrud:

    def test_create_cor_padrao(self, catalog):
        """Deve usar a cor padrão quando não informada."""
        created = catalog.create(CreateStatusInputDTO(name="Pausado"))

        assert created.color == DEFAULT_COLOR
        assert created.active is True

    def test_nome_duplicado_sem_diferenciar_maiusculas(self, catalog):
        """Deve rejeitar nome igual com outra caixa."""
        catalog.ensure_seeded()

        with pytest.raises(DuplicateNameError):
            catalog.create(CreateStatusInputDTO(name="  aberto "))

    def test_nome_vazio_erro(self, catalog):
        """Deve rejeitar nome vazio."""
        with pytest.raises(ValidationError):
            catalog.create(CreateStatusInputDTO(name="   "))

    def test_update_parcial_mantem_cor(self, catalog):
        """Deve manter cor e ativo quando não informados."""
        catalog.ensure_seeded()

        updated = catalog.update(2, UpdateStatusInputDTO(name="Em atendimento"))

        assert updated.name == "Em atendimento"
        assert updated.color == "#feca57"
        assert catalog.get_by_id(2).name == "Em atendimento"

    def test_update_mesmo_nome_permitido(self, catalog):
        """Renomear para o próprio nome com outra caixa não é duplicidade."""
        catalog.ensure_seeded()

        updated = catalog.update(1, UpdateStatusInputDTO(name="ABERTO"))

        assert updated.name == "ABERTO"

    def test_update_nome_de_outro_erro(self, catalog):
        """Deve rejeitar renomear para o nome de outro status."""
        catalog.ensure_seeded()

        with pytest.raises(DuplicateNameError):
            catalog.update(1, UpdateStatusInputDTO(name="Cancelado"))

    def test_delete_duas_vezes_erro(self, catalog):
        """A segunda exclusão deve lançar EntityNotFoundError."""
        catalog.ensure_seeded()
        catalog.delete(4)

        with pytest.raises(EntityNotFoundError):
            catalog.delete(4)
