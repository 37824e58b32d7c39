# config/settings/production.py

import logging

import dj_database_url
from .base import *

DEBUG = False

ALLOWED_HOSTS = env('ALLOWED_HOSTS', default=['pevetech.com.br', 'www.pevetech.com.br'])
CSRF_TRUSTED_ORIGINS = env(
    'CSRF_TRUSTED_ORIGINS',
    default=['https://pevetech.com.br', 'https://www.pevetech.com.br']
)

# === VARIÁVEIS OBRIGATÓRIAS ===

obrigatorias = ['SECRET_KEY', 'REDIS_URL']
if not env('DATABASE_URL', default=None):
    obrigatorias += ['DB_NAME', 'DB_USER', 'DB_PASSWORD', 'DB_HOST']

faltando = [nome for nome in obrigatorias if not env(nome, default=None)]
if faltando:
    raise ValueError(f"Variáveis obrigatórias em produção: {', '.join(faltando)}")

# === SEGURANÇA ===

SECURE_SSL_REDIRECT = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

# Os iframes do Labs apontam para apps externos; o site em si não é embutido
X_FRAME_OPTIONS = 'DENY'

# === BANCO ===

if env('DATABASE_URL', default=None):
    DATABASES['default'] = dj_database_url.parse(
        env('DATABASE_URL'),
        conn_max_age=600,
        conn_health_checks=True,
    )
else:
    DATABASES['default'].update({
        'OPTIONS': {'sslmode': 'require'},
        'CONN_MAX_AGE': 600,
    })

# === EMAIL ===

EMAIL_BACKEND = 'django.core.mail.backends.smtp.EmailBackend'
EMAIL_HOST = env('EMAIL_HOST', default='smtp.gmail.com')
EMAIL_PORT = env.int('EMAIL_PORT', default=587)
EMAIL_USE_TLS = env.bool('EMAIL_USE_TLS', default=True)
EMAIL_HOST_USER = env('EMAIL_HOST_USER', default='')
EMAIL_HOST_PASSWORD = env('EMAIL_HOST_PASSWORD', default='')

# === LOGGING E SENTRY ===

LOGGING['handlers']['file']['filename'] = env('LOG_FILE', default='/var/log/pevetech/pevetech.log')

if env('SENTRY_DSN', default=None):
    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration
    from sentry_sdk.integrations.logging import LoggingIntegration

    sentry_sdk.init(
        dsn=env('SENTRY_DSN'),
        integrations=[
            DjangoIntegration(),
            LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
        ],
        traces_sample_rate=env.float('SENTRY_TRACES_SAMPLE_RATE', default=0.1),
        send_default_pii=False,
        environment=env('ENVIRONMENT', default='production'),
        release=f'pevetech@{PEVETECH_VERSAO}',
    )

# === PERFORMANCE ===

MIDDLEWARE = ['django.middleware.gzip.GZipMiddleware'] + MIDDLEWARE

TEMPLATES[0]['APP_DIRS'] = False
TEMPLATES[0]['OPTIONS']['loaders'] = [
    ('django.template.loaders.cached.Loader', [
        'django.template.loaders.filesystem.Loader',
        'django.template.loaders.app_directories.Loader',
    ]),
]
