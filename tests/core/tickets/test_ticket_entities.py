"""
Testes Unitários para Entidades do Domínio de Chamados.

Coverage:
- TicketEntity.create(): Validações de criação
- TicketEntity.change_status(): Regra de fechamento (closed_at)
- TicketEntity.apply_patch(): Alteração parcial
- TicketPriority.from_string(): Valores atuais e antigos
"""

import pytest

from src.core.shared.exceptions import ValidationError
from src.core.statuses.entities import (
    CANCELLED_STATUS_ID,
    IN_PROGRESS_STATUS_ID,
    OPEN_STATUS_ID,
    TERMINAL_STATUS_ID,
)
from src.core.tickets.entities import TicketEntity, TicketPriority


def make_ticket(**kwargs) -> TicketEntity:
    defaults = {
        'title': "Projetor quebrado",
        'room_id': 1,
        'description': "O projetor da sala não liga desde ontem",
    }
    defaults.update(kwargs)
    return TicketEntity.create(**defaults)


class TestTicketEntityCriacao:
    """Testes para criação de chamados."""

    def test_criar_chamado_valido(self):
        """Deve criar chamado aberto com dados válidos."""
        ticket = make_ticket(priority="high", requester="  Maria  ")

        assert ticket.id is None
        assert ticket.title == "Projetor quebrado"
        assert ticket.room_id == 1
        assert ticket.status_id == OPEN_STATUS_ID
        assert ticket.priority == TicketPriority.HIGH
        assert ticket.requester == "Maria"
        assert ticket.assignee is None
        assert ticket.closed_at is None
        assert ticket.created_at == ticket.updated_at

    def test_criar_chamado_com_valores_default(self):
        """Deve usar prioridade média quando não informada."""
        ticket = make_ticket()

        assert ticket.priority == TicketPriority.MEDIUM
        assert ticket.requester is None
        assert ticket.notes is None

    def test_remove_espacos_do_titulo(self):
        """Deve remover espaços das pontas do título."""
        ticket = make_ticket(title="   Ar condicionado   ")
        assert ticket.title == "Ar condicionado"

    @pytest.mark.parametrize("title", ["", "   ", "ab", "x" * 201, None])
    def test_titulo_invalido_erro(self, title):
        """Deve rejeitar título vazio, curto ou longo demais."""
        with pytest.raises(ValidationError) as exc_info:
            make_ticket(title=title)

        assert exc_info.value.field == "title"

    def test_titulo_nos_limites(self):
        """Deve aceitar título com 3 e com 200 caracteres."""
        assert make_ticket(title="abc").title == "abc"
        assert len(make_ticket(title="x" * 200).title) == 200

    @pytest.mark.parametrize("description", ["", "curta", "x" * 1001])
    def test_descricao_invalida_erro(self, description):
        """Deve rejeitar descrição fora de 10 a 1000 caracteres."""
        with pytest.raises(ValidationError) as exc_info:
            make_ticket(description=description)

        assert exc_info.value.field == "description"

    def test_solicitante_longo_demais_erro(self):
        """Deve rejeitar solicitante acima do limite."""
        with pytest.raises(ValidationError) as exc_info:
            make_ticket(requester="x" * 201)

        assert exc_info.value.field == "requester"

    def test_criar_direto_no_status_terminal(self):
        """Deve preencher closed_at quando criado já concluído."""
        ticket = make_ticket(status_id=TERMINAL_STATUS_ID)

        assert ticket.closed_at is not None
        assert ticket.is_closed


class TestTicketPriority:
    """Testes para conversão de prioridade."""

    @pytest.mark.parametrize("value,expected", [
        ("low", TicketPriority.LOW),
        ("HIGH", TicketPriority.HIGH),
        (" medium ", TicketPriority.MEDIUM),
        ("baixa", TicketPriority.LOW),
        ("media", TicketPriority.MEDIUM),
        ("média", TicketPriority.MEDIUM),
        ("alta", TicketPriority.HIGH),
        (None, TicketPriority.MEDIUM),
        ("", TicketPriority.MEDIUM),
        (TicketPriority.LOW, TicketPriority.LOW),
    ])
    def test_from_string(self, value, expected):
        """Deve aceitar valores atuais e antigos em português."""
        assert TicketPriority.from_string(value) == expected

    def test_prioridade_invalida_erro(self):
        """Deve rejeitar prioridade desconhecida."""
        with pytest.raises(ValidationError) as exc_info:
            TicketPriority.from_string("urgentissima")

        assert exc_info.value.field == "priority"


class TestTicketEntityFechamento:
    """Testes da regra de fechamento."""

    def test_concluir_preenche_closed_at(self):
        """Deve preencher closed_at ao entrar no status terminal."""
        ticket = make_ticket()

        ticket.change_status(TERMINAL_STATUS_ID)

        assert ticket.closed_at is not None
        assert ticket.closed_at == ticket.updated_at

    def test_reabrir_limpa_closed_at(self):
        """Deve limpar closed_at ao sair do status terminal."""
        ticket = make_ticket()
        ticket.change_status(TERMINAL_STATUS_ID)

        ticket.change_status(IN_PROGRESS_STATUS_ID)

        assert ticket.closed_at is None
        assert not ticket.is_closed

    def test_manter_terminal_preserva_closed_at(self):
        """Deve manter closed_at quando o status terminal é reenviado."""
        ticket = make_ticket()
        ticket.change_status(TERMINAL_STATUS_ID)
        closed_at = ticket.closed_at

        ticket.change_status(TERMINAL_STATUS_ID, notes="Trocada a lâmpada")

        assert ticket.closed_at == closed_at
        assert ticket.notes == "Trocada a lâmpada"

    def test_cancelado_nao_preenche_closed_at(self):
        """Deve tratar apenas o status terminal como fechamento."""
        ticket = make_ticket()

        ticket.change_status(CANCELLED_STATUS_ID)

        assert ticket.closed_at is None

    def test_change_status_atualiza_responsavel(self):
        """Deve substituir o responsável e manter quando None."""
        ticket = make_ticket(assignee="João")

        ticket.change_status(IN_PROGRESS_STATUS_ID)
        assert ticket.assignee == "João"

        ticket.change_status(IN_PROGRESS_STATUS_ID, assignee="")
        assert ticket.assignee is None


class TestTicketEntityPatch:
    """Testes para alteração parcial."""

    def test_patch_mantem_campos_nao_informados(self):
        """Deve alterar apenas os campos informados."""
        ticket = make_ticket(requester="Maria")
        created_at = ticket.created_at

        ticket.apply_patch(title="Projetor sem imagem")

        assert ticket.title == "Projetor sem imagem"
        assert ticket.requester == "Maria"
        assert ticket.created_at == created_at
        assert ticket.updated_at >= created_at

    def test_patch_com_status_aplica_fechamento(self):
        """Deve aplicar a regra de fechamento quando o patch muda o status."""
        ticket = make_ticket()

        ticket.apply_patch(status_id=TERMINAL_STATUS_ID)

        assert ticket.closed_at is not None

    def test_patch_titulo_invalido_erro(self):
        """Deve validar o título também na alteração."""
        ticket = make_ticket()

        with pytest.raises(ValidationError):
            ticket.apply_patch(title="x")

    def test_copy_independente(self):
        """Deve criar cópia que não compartilha alterações."""
        ticket = make_ticket()
        clone = ticket.copy()

        clone.title = "Outro título"

        assert ticket.title == "Projetor quebrado"
