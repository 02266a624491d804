import os
from datetime import timedelta
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-cosbaii-dev-key')

DEBUG = env_bool('DJANGO_DEBUG', True)

ALLOWED_HOSTS = [h for h in os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if h]

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # 第三方
    'rest_framework',
    'django_filters',
    'django_fsm',
    'notifications',

    # 业务
    'userManage',
    'competitions',
    'credential',
    'badge',
    'notification',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'cosbaii.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'cosbaii.wsgi.application'

# 数据库：默认 SQLite，可通过 COSBAII_DB_* 环境变量切换
DATABASES = {
    'default': {
        'ENGINE': os.environ.get('COSBAII_DB_ENGINE', 'django.db.backends.sqlite3'),
        'NAME': os.environ.get('COSBAII_DB_NAME', str(BASE_DIR / 'db.sqlite3')),
        'USER': os.environ.get('COSBAII_DB_USER', ''),
        'PASSWORD': os.environ.get('COSBAII_DB_PASSWORD', ''),
        'HOST': os.environ.get('COSBAII_DB_HOST', ''),
        'PORT': os.environ.get('COSBAII_DB_PORT', ''),
    }
}

AUTH_USER_MODEL = 'userManage.User'

AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

LANGUAGE_CODE = 'en-us'
TIME_ZONE = os.environ.get('COSBAII_TIME_ZONE', 'Asia/Manila')
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
MEDIA_URL = '/media/'
MEDIA_ROOT = BASE_DIR / 'media'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework_simplejwt.authentication.JWTAuthentication',
        'rest_framework.authentication.SessionAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'DEFAULT_FILTER_BACKENDS': [
        'django_filters.rest_framework.DjangoFilterBackend',
    ],
    'EXCEPTION_HANDLER': 'cosbaii.exceptions.api_exception_handler',
}

SIMPLE_JWT = {
    'ACCESS_TOKEN_LIFETIME': timedelta(hours=int(os.environ.get('COSBAII_ACCESS_TOKEN_HOURS', '12'))),
    'REFRESH_TOKEN_LIFETIME': timedelta(days=7),
}

# 通知的附加字段 (notification_type / title / related_id) 存入 Notification.data
DJANGO_NOTIFICATIONS_CONFIG = {
    'USE_JSONFIELD': True,
}

# 参赛记录展示图的兜底图片（既无作品照片也无竞赛 Logo 时使用）
COSBAII_CREDENTIAL_PLACEHOLDER = os.environ.get(
    'COSBAII_CREDENTIAL_PLACEHOLDER', '/icons/cosbaii-icon-primary.svg'
)

# 删除外部图片资源的函数路径 callable(url)，失败只记录日志
COSBAII_ASSET_DELETER = os.environ.get(
    'COSBAII_ASSET_DELETER', 'credential.assets.delete_from_storage'
)

COSBAII_NOTIFY_ON_CREDENTIAL_DELETE = env_bool('COSBAII_NOTIFY_ON_CREDENTIAL_DELETE', True)

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': os.environ.get('COSBAII_LOG_LEVEL', 'INFO'),
    },
    'loggers': {
        'django.db.backends': {
            'level': 'WARNING',
        },
    },
}
