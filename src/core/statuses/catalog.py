"""
Status Catalog - CRUD da coleção de status.

O catálogo garante a unicidade de nomes e o seed canônico.
A proteção contra exclusão de status referenciado fica na
fachada, que é quem enxerga os chamados.
"""

import logging
from typing import List, Optional

from src.core.shared.exceptions import (
    DuplicateNameError,
    EntityNotFoundError,
    LegacyStatusCatalogError,
)

from .dtos import CreateStatusInputDTO, UpdateStatusInputDTO
from .entities import (
    CANCELLED_STATUS_ID,
    StatusEntity,
    default_status_seed,
    is_legacy_catalog,
)
from .ports import StatusRepository

logger = logging.getLogger(__name__)


class StatusCatalog:
    """
    Catálogo de status sobre um StatusRepository.

    Example:
        catalog = StatusCatalog(InMemoryStatusRepository())
        catalog.ensure_seeded()
        catalog.create(CreateStatusInputDTO(name="Aguardando peça"))
    """

    ENTITY_TYPE = "Status"

    def __init__(self, repository: StatusRepository):
        self.repository = repository

    def list(self) -> List[StatusEntity]:
        return self.repository.list_all()

    def get_by_id(self, status_id: int) -> StatusEntity:
        """
        Busca status por id.

        Raises:
            EntityNotFoundError: Se não existir
        """
        status = self.repository.get_by_id(status_id)
        if status is None:
            raise EntityNotFoundError(
                "Status não encontrado",
                entity_type=self.ENTITY_TYPE,
                entity_id=status_id,
            )
        return status

    def create(self, data: CreateStatusInputDTO) -> StatusEntity:
        """
        Cria status novo.

        Raises:
            ValidationError: Se nome inválido
            DuplicateNameError: Se já existe status com o mesmo nome
        """
        status = StatusEntity.create(name=data.name, color=data.color, active=data.active)
        self._ensure_unique_name(status.name)
        created = self.repository.add(status)
        logger.info(f"Status created: {created.id} ({created.name})")
        return created

    def update(self, status_id: int, patch: UpdateStatusInputDTO) -> StatusEntity:
        """
        Atualiza status existente (parcial).

        Raises:
            EntityNotFoundError: Se não existir
            ValidationError: Se nome inválido
            DuplicateNameError: Se outro status já usa o nome
        """
        status = self.get_by_id(status_id)
        status.apply_patch(name=patch.name, color=patch.color, active=patch.active)
        self._ensure_unique_name(status.name, exclude_id=status_id)
        self.repository.save(status)
        logger.info(f"Status updated: {status_id}")
        return status

    def delete(self, status_id: int) -> None:
        """
        Remove status (sem cascata).

        Raises:
            EntityNotFoundError: Se não existir
        """
        if not self.repository.delete(status_id):
            raise EntityNotFoundError(
                "Status não encontrado",
                entity_type=self.ENTITY_TYPE,
                entity_id=status_id,
            )
        logger.info(f"Status deleted: {status_id}")

    # Seed ----------------------------------------------------------------

    def seed(self) -> List[StatusEntity]:
        """Insere as entradas canônicas que ainda não existem."""
        created = []
        for status in default_status_seed():
            if self.repository.get_by_id(status.id) is None:
                created.append(self.repository.add(status))
        if created:
            logger.info(f"Status catalog seeded with {len(created)} entries")
        return created

    def ensure_seeded(self) -> None:
        """
        Garante o catálogo canônico na inicialização.

        Catálogo vazio recebe o seed; o formato legado de 3 entradas
        é recusado até a migração explícita.

        Raises:
            LegacyStatusCatalogError: Se o catálogo está no formato legado
        """
        statuses = self.repository.list_all()
        if not statuses:
            self.seed()
            return
        if is_legacy_catalog(statuses):
            raise LegacyStatusCatalogError(
                "Catálogo de status no formato antigo (3 entradas). "
                "Execute a migração com scripts/quick_setup.py --migrate-legacy-status"
            )

    def is_legacy(self) -> bool:
        return is_legacy_catalog(self.repository.list_all())

    def migrate_legacy_catalog(self) -> Optional[StatusEntity]:
        """
        Migra o catálogo legado para o formato canônico.

        Normaliza as cores dos ids 1 a 3 e adiciona "Cancelado" (id 4).
        Os nomes existentes são mantidos.

        Returns:
            O status "Cancelado" criado, ou None se não havia o que migrar

        Raises:
            DuplicateNameError: Se já existe outro status chamado "Cancelado"
        """
        if not self.is_legacy():
            return None

        canonical = {status.id: status for status in default_status_seed()}
        for status in self.repository.list_all():
            status.color = canonical[status.id].color
            status.active = True
            self.repository.save(status)

        cancelled = canonical[CANCELLED_STATUS_ID]
        self._ensure_unique_name(cancelled.name)
        created = self.repository.add(cancelled)
        logger.warning("Legacy status catalog migrated to the 4-entry catalog")
        return created

    def _ensure_unique_name(self, name: str, exclude_id: Optional[int] = None) -> None:
        existing = self.repository.get_by_name(name)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateNameError(
                f"Já existe um status com o nome '{name}'",
                entity_type=self.ENTITY_TYPE,
                name=name,
            )
