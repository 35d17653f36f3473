# settings.py 头部
from pathlib import Path
import os
BASE_DIR = Path(__file__).resolve().parent.parent

from dotenv import load_dotenv
load_dotenv(BASE_DIR / ".env")  # 确保先加载 .env


# =========================
# 静态文件设置
# =========================
STATIC_URL = '/static/'
STATIC_ROOT = os.path.join(BASE_DIR, 'staticfiles')

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}

MIDDLEWARE = [
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'common.middleware.NavigationUsageMiddleware',
]


# =========================
# 安全配置
# =========================
SECRET_KEY = os.getenv('SECRET_KEY', 'dqf-dev-only-secret-key')
DEBUG = os.getenv('DEBUG', 'False') == 'True'

ALLOWED_HOSTS = [
    h.strip() for h in os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if h.strip()
]

# =========================
# 应用
# =========================
INSTALLED_APPS = [
    # 系统自带
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # 你的 app
    'drivers.apps.DriversConfig',
    'common',
    'widget_tweaks',
]

ROOT_URLCONF = 'dqf_project.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.template.context_processors.csrf',
                'django.contrib.messages.context_processors.messages',
                'common.context_processors.nav_items',
            ],
        },
    },
]

WSGI_APPLICATION = 'dqf_project.wsgi.application'

# =========================
# 数据库
# =========================
# 没有持久层：司机记录只在会话里暂存，提交由 drivers.services 模拟
DATABASES = {}

# =========================
# 缓存 / 会话
# =========================
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'dqf-default',
    },
    # 暂存中的附件字节（pending / confirmed）
    'staging': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'dqf-staging',
        'OPTIONS': {'MAX_ENTRIES': 2000},
    },
}

SESSION_ENGINE = 'django.contrib.sessions.backends.cache'
MESSAGE_STORAGE = 'django.contrib.messages.storage.session.SessionStorage'

# =========================
# 国际化
# =========================
LANGUAGE_CODE = 'en-us'
TIME_ZONE = os.getenv('TIME_ZONE', 'America/Chicago')
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

DATE_FORMAT = "N j, Y"
DATETIME_FORMAT = "N j, Y H:i"

# 上传：大文件走临时文件，不限制在内存
FILE_UPLOAD_MAX_MEMORY_SIZE = 2_621_440
DATA_UPLOAD_MAX_MEMORY_SIZE = 2_621_440

# =========================
# DQF 表单配置
# =========================
DQF_UPLOAD_MAX_SIZE_MB = float(os.getenv('DQF_UPLOAD_MAX_SIZE_MB', '10'))
DQF_PHOTO_MAX_SIZE_MB = float(os.getenv('DQF_PHOTO_MAX_SIZE_MB', '5'))
DQF_ACCEPTED_FILE_TYPES = os.getenv('DQF_ACCEPTED_FILE_TYPES', '.dqf,.pdf,.doc,.docx')
DQF_PHOTO_FILE_TYPES = os.getenv('DQF_PHOTO_FILE_TYPES', 'image/*')

# 模拟提交：固定延迟后返回成功
DQF_SUBMIT_DELAY_SECONDS = float(os.getenv('DQF_SUBMIT_DELAY_SECONDS', '2'))
DQF_RECORD_SUBMITTER = os.getenv('DQF_RECORD_SUBMITTER', 'drivers.services.SimulatedRecordSubmitter')
# 提交中标志的有效期，超过即认为上次提交已中断
DQF_SUBMIT_LOCK_SECONDS = int(os.getenv('DQF_SUBMIT_LOCK_SECONDS', '120'))

DQF_STAGING_CACHE = 'staging'
DQF_STAGING_TTL_SECONDS = int(os.getenv('DQF_STAGING_TTL_SECONDS', '3600'))

DQF_FORM_FEATURES = {
    'MULTI_ATTACHMENT': os.getenv('DQF_MULTI_ATTACHMENT', 'True') == 'True',
    'MULTI_SELECT_LICENSE_CLASSES': os.getenv('DQF_MULTI_SELECT_LICENSE_CLASSES', 'True') == 'True',
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
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
        'level': 'INFO',
    },
    'loggers': {
        'drivers': {
            'handlers': ['console'],
            'level': os.getenv('DQF_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
