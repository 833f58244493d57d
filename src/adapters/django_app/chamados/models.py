"""
Django Models para salas, status e chamados.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/{rooms,statuses,tickets}.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Lógica de negócio fica nas Entities do Core
- Models são mapeados para/de Entities via Mappers

Garantias do banco (além das regras da fachada):
- `name_key` único: nome de sala/status sem diferenciar maiúsculas
- `on_delete=PROTECT`: sala/status referenciado não pode ser removido
"""

from django.db import models


class RoomModel(models.Model):
    """
    Model Django para persistência de Salas.

    Fields:
        id: Auto-incremento (nunca reutilizado)
        name: Nome/número da sala
        name_key: Nome normalizado (casefold) para unicidade
        description: Descrição livre
        active: Se recebe chamados novos
        qr_token: Token do QR Code
    """

    id = models.BigAutoField(primary_key=True)

    name = models.CharField(
        max_length=100,
        help_text="Nome/número da sala"
    )

    name_key = models.CharField(
        max_length=400,
        unique=True,
        editable=False,
        help_text="Nome normalizado para comparação sem maiúsculas"
    )

    description = models.CharField(
        max_length=500,
        blank=True,
        default='',
        help_text="Descrição da sala"
    )

    active = models.BooleanField(
        default=True,
        db_index=True,
        help_text="Salas inativas não recebem chamados novos"
    )

    qr_token = models.CharField(
        max_length=64,
        unique=True,
        help_text="Token opaco lido pelo QR Code"
    )

    class Meta:
        db_table = 'salas'
        verbose_name = 'Sala'
        verbose_name_plural = 'Salas'
        ordering = ['id']

    def __str__(self):
        return self.name


class StatusModel(models.Model):
    """
    Model Django para persistência do Catálogo de Status.

    Os ids 1 a 4 vêm do seed com valores explícitos.
    """

    id = models.BigAutoField(primary_key=True)

    name = models.CharField(
        max_length=100,
        help_text="Nome do status"
    )

    name_key = models.CharField(
        max_length=400,
        unique=True,
        editable=False,
        help_text="Nome normalizado para comparação sem maiúsculas"
    )

    color = models.CharField(
        max_length=20,
        default='#000000',
        help_text="Cor de exibição"
    )

    active = models.BooleanField(default=True)

    class Meta:
        db_table = 'status'
        verbose_name = 'Status'
        verbose_name_plural = 'Status'
        ordering = ['id']

    def __str__(self):
        return self.name


class TicketPriorityChoices(models.TextChoices):
    """Choices para prioridade (espelha TicketPriority do Core)."""
    LOW = 'low', 'Baixa'
    MEDIUM = 'medium', 'Média'
    HIGH = 'high', 'Alta'


class TicketModel(models.Model):
    """
    Model Django para persistência de Chamados.

    Fields:
        room: Sala do chamado (PROTECT)
        status: Status atual (PROTECT)
        created_at: Definido na criação, nunca alterado
        updated_at: Definido pela entidade a cada alteração
        closed_at: Preenchido somente no status terminal
    """

    id = models.BigAutoField(primary_key=True)

    title = models.CharField(
        max_length=200,
        help_text="Título do chamado"
    )

    description = models.TextField(
        help_text="Descrição detalhada do problema"
    )

    room = models.ForeignKey(
        RoomModel,
        on_delete=models.PROTECT,
        related_name='tickets',
        db_column='room_id',
    )

    status = models.ForeignKey(
        StatusModel,
        on_delete=models.PROTECT,
        related_name='tickets',
        db_column='status_id',
    )

    priority = models.CharField(
        max_length=10,
        choices=TicketPriorityChoices.choices,
        default=TicketPriorityChoices.MEDIUM,
        db_index=True,
    )

    requester = models.CharField(max_length=200, null=True, blank=True)
    assignee = models.CharField(max_length=200, null=True, blank=True)
    notes = models.TextField(null=True, blank=True)

    # Timestamps vêm da entidade (sem auto_now)
    created_at = models.DateTimeField(db_index=True)
    updated_at = models.DateTimeField()
    closed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'chamados'
        verbose_name = 'Chamado'
        verbose_name_plural = 'Chamados'
        ordering = ['-id']
        indexes = [
            models.Index(fields=['room', 'status'], name='chamados_room_status_idx'),
        ]

    def __str__(self):
        return f"[{self.id}] {self.title}"

    def __repr__(self):
        return f"<TicketModel id={self.id} status={self.status_id}>"
