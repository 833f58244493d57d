"""
Django Settings para Gestão de Chamados.

O Django só é usado como backend relacional (ORM + migrations);
não há views, templates nem middleware.
Usa variáveis de ambiente (arquivo .env) para configuração.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

from src.adapters.django_app.shared.database import DatabaseConfig

# Carregar variáveis de ambiente
load_dotenv()

# =============================================================================
# Caminhos Base
# =============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent.parent

DATA_DIR = BASE_DIR / 'database'

# =============================================================================
# Segurança
# =============================================================================

SECRET_KEY = os.getenv(
    'SECRET_KEY',
    'django-insecure-dev-key-change-in-production-please'
)

DEBUG = os.getenv('DEBUG', 'False').lower() in ('true', '1', 'yes')

# =============================================================================
# Aplicações
# =============================================================================

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'src.adapters.django_app.chamados',
]

# =============================================================================
# Banco de Dados
# =============================================================================

# DATABASE_URL (sqlite:///... ou postgresql://...); SQLite por padrão
DATABASE_CONFIG = DatabaseConfig.from_env(default_sqlite_path=str(DATA_DIR / 'chamados.db'))

DATABASES = {
    'default': DATABASE_CONFIG.to_django_config(),
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# =============================================================================
# Internacionalização
# =============================================================================

LANGUAGE_CODE = 'pt-br'
TIME_ZONE = 'America/Sao_Paulo'
USE_I18N = True
USE_TZ = True

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'src.core': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'src.adapters': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}

# =============================================================================
# Camada de Consistência (Chamados)
# =============================================================================

# Backend de armazenamento: 'django' | 'memory' | 'ephemeral'
CHAMADOS_BACKEND = os.getenv('CHAMADOS_BACKEND', 'django').strip().lower()

# Seed inicial: 'default' (só status) | 'demo' (status + salas + chamados)
# Vazio: 'demo' no backend efêmero, 'default' nos demais
CHAMADOS_SEED = os.getenv('CHAMADOS_SEED', '').strip().lower() or None

# Snapshot JSON do backend 'memory' (vazio = sem persistência)
CHAMADOS_DATA_FILE = os.getenv('CHAMADOS_DATA_FILE', '').strip() or None

# Aplicar migrations automaticamente ao iniciar o backend 'django'
CHAMADOS_AUTO_MIGRATE = os.getenv('CHAMADOS_AUTO_MIGRATE', 'True').lower() in ('true', '1', 'yes')
