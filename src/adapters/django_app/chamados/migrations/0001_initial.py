"""
Migration inicial do app Chamados.

Cria as tabelas:
- salas: Registro de salas
- status: Catálogo de status
- chamados: Chamados (FKs PROTECT para salas e status)

O seed do catálogo não fica aqui: é aplicado pelo bootstrap,
que também detecta o catálogo legado.
"""

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabela: salas
        # =================================================================
        migrations.CreateModel(
            name='RoomModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('name', models.CharField(
                    max_length=100,
                    help_text='Nome/número da sala'
                )),
                ('name_key', models.CharField(
                    max_length=400,
                    unique=True,
                    editable=False,
                    help_text='Nome normalizado para comparação sem maiúsculas'
                )),
                ('description', models.CharField(
                    max_length=500,
                    blank=True,
                    default='',
                    help_text='Descrição da sala'
                )),
                ('active', models.BooleanField(
                    default=True,
                    db_index=True,
                    help_text='Salas inativas não recebem chamados novos'
                )),
                ('qr_token', models.CharField(
                    max_length=64,
                    unique=True,
                    help_text='Token opaco lido pelo QR Code'
                )),
            ],
            options={
                'verbose_name': 'Sala',
                'verbose_name_plural': 'Salas',
                'db_table': 'salas',
                'ordering': ['id'],
            },
        ),

        # =================================================================
        # Tabela: status
        # =================================================================
        migrations.CreateModel(
            name='StatusModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('name', models.CharField(
                    max_length=100,
                    help_text='Nome do status'
                )),
                ('name_key', models.CharField(
                    max_length=400,
                    unique=True,
                    editable=False,
                    help_text='Nome normalizado para comparação sem maiúsculas'
                )),
                ('color', models.CharField(
                    max_length=20,
                    default='#000000',
                    help_text='Cor de exibição'
                )),
                ('active', models.BooleanField(default=True)),
            ],
            options={
                'verbose_name': 'Status',
                'verbose_name_plural': 'Status',
                'db_table': 'status',
                'ordering': ['id'],
            },
        ),

        # =================================================================
        # Tabela: chamados
        # =================================================================
        migrations.CreateModel(
            name='TicketModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('title', models.CharField(
                    max_length=200,
                    help_text='Título do chamado'
                )),
                ('description', models.TextField(
                    help_text='Descrição detalhada do problema'
                )),
                ('room', models.ForeignKey(
                    db_column='room_id',
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='tickets',
                    to='chamados.roommodel',
                )),
                ('status', models.ForeignKey(
                    db_column='status_id',
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='tickets',
                    to='chamados.statusmodel',
                )),
                ('priority', models.CharField(
                    max_length=10,
                    choices=[
                        ('low', 'Baixa'),
                        ('medium', 'Média'),
                        ('high', 'Alta'),
                    ],
                    default='medium',
                    db_index=True,
                )),
                ('requester', models.CharField(max_length=200, null=True, blank=True)),
                ('assignee', models.CharField(max_length=200, null=True, blank=True)),
                ('notes', models.TextField(null=True, blank=True)),
                ('created_at', models.DateTimeField(db_index=True)),
                ('updated_at', models.DateTimeField()),
                ('closed_at', models.DateTimeField(null=True, blank=True)),
            ],
            options={
                'verbose_name': 'Chamado',
                'verbose_name_plural': 'Chamados',
                'db_table': 'chamados',
                'ordering': ['-id'],
                'indexes': [
                    models.Index(fields=['room', 'status'], name='chamados_room_status_idx'),
                ],
            },
        ),
    ]
