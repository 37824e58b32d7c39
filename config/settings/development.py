# config/settings/development.py

from .base import *

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '0.0.0.0']

# Debug Toolbar (extra "dev" do pyproject)
try:
    import debug_toolbar  # noqa: F401

    INSTALLED_APPS += ['debug_toolbar']
    MIDDLEWARE = ['debug_toolbar.middleware.DebugToolbarMiddleware'] + MIDDLEWARE
    INTERNAL_IPS = ['127.0.0.1']
    DEBUG_TOOLBAR_CONFIG = {'SHOW_COLLAPSED': True}
except ImportError:
    pass

# === BANCO ===

# USE_SQLITE=true dispensa o PostgreSQL local
if env.bool('USE_SQLITE', default=False):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }
else:
    DATABASES['default']['CONN_MAX_AGE'] = 60

DATABASES['default']['ATOMIC_REQUESTS'] = True

print(f"🗄️  Banco: {DATABASES['default']['ENGINE'].rsplit('.', 1)[-1]} ({DATABASES['default']['NAME']})")

# === CACHE E CHANNEL LAYER ===

# Sem REDIS_URL tudo fica em memória (um único processo)
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'pevetech-dev',
    }
}
CHANNEL_LAYERS = {
    'default': {'BACKEND': 'channels.layers.InMemoryChannelLayer'},
}

if env('REDIS_URL', default=None):
    import redis

    try:
        redis.from_url(REDIS_URL).ping()
    except redis.RedisError as e:
        print(f"⚠️  Redis indisponível ({e}), usando memória local")
    else:
        CACHES['default'] = {
            'BACKEND': 'django_redis.cache.RedisCache',
            'LOCATION': REDIS_URL,
            'OPTIONS': {'CLIENT_CLASS': 'django_redis.client.DefaultClient'},
        }
        CHANNEL_LAYERS['default'] = {
            'BACKEND': 'channels_redis.core.RedisChannelLayer',
            'CONFIG': {'hosts': [REDIS_URL]},
        }
        print("🔴 Redis conectado (cache e WebSocket)")

STORAGES['staticfiles'] = {
    'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
}

LOGGING['handlers']['console']['level'] = 'DEBUG'
LOGGING['loggers']['apps']['level'] = 'DEBUG'

# Terminal do diagnóstico mais rápido ao testar na mão
PEVETECH_DIAGNOSTICO_PASSOS_MS = env.int('PEVETECH_DIAGNOSTICO_PASSOS_MS', default=300)

SHELL_PLUS_IMPORTS = [
    'from apps.relatorios.utils import resumo_metricas, calcular_mrr',
    'from apps.crm.services import mover_lead, criar_lead',
    'from apps.core.utils import formatar_moeda_brl',
]

print("🚀 Pevetech em modo DESENVOLVIMENTO")
