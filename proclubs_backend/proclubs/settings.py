from pathlib import Path

from dotenv import load_dotenv

from .config import load_config

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

# Lu une seule fois ; les composants reçoivent leurs valeurs depuis PROCLUBS.
PROCLUBS = load_config()


SECRET_KEY = PROCLUBS.secret_key
DEBUG = PROCLUBS.debug

ALLOWED_HOSTS = ['*']

INSTALLED_APPS = [
    'jazzmin',
    # avant staticfiles : surcharge de runserver
    'core',
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    # 3rd party
    'rest_framework',
    'corsheaders',
    # local apps
    'clubs',
    'players',
    'standings',
    'users',
    'ea',
    'discordbot',
]

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'proclubs.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'proclubs.wsgi.application'

DATABASES = {
    'default': PROCLUBS.database,
}

LANGUAGE_CODE = 'fr-fr'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "core.authentication.BearerTokenAuthentication",
    ),
    "DEFAULT_PERMISSION_CLASSES": (
        "core.permissions.ReadOnlyOrAuthenticated",
    ),
    "DEFAULT_RENDERER_CLASSES": (
        "rest_framework.renderers.JSONRenderer",
    ),
    "EXCEPTION_HANDLER": "core.exceptions.api_exception_handler",
}

# CORS
CORS_ALLOW_ALL_ORIGINS = False
CORS_ALLOWED_ORIGINS = list(PROCLUBS.allowed_origins)


LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "django": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "discord": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "httpx": {"handlers": ["console"], "level": "WARNING", "propagate": False},
        **{
            name: {"handlers": ["console"], "level": PROCLUBS.log_level, "propagate": False}
            for name in ("core", "clubs", "players", "standings", "users", "ea", "discordbot")
        },
    },
}


JAZZMIN_SETTINGS = {
    "site_title": "Pro Clubs Championship",
    "site_header": "Pro Clubs Championship",
    "site_brand": "Pro Clubs",
    "welcome_sign": "Tableau de bord",
    "copyright": "Pro Clubs Championship",

    "topmenu_links": [
        {"name": "Accueil", "url": "admin:index", "permissions": ["auth.view_user"]},
        {"app": "clubs"},
        {"app": "players"},
        {"app": "standings"},
        {"app": "discordbot"},
    ],

    "order_with_respect_to": [
        "auth", "clubs", "players", "standings", "users", "discordbot"
    ],

    # Icônes (gauche + cartes) — FontAwesome (fa)
    "icons": {
        "auth": "fas fa-shield-alt",
        "auth.Group": "fas fa-users-cog",
        "auth.User": "fas fa-user",
        "clubs": "fas fa-flag",
        "clubs.Club": "fas fa-shield",
        "players": "fas fa-user-friends",
        "players.Player": "fas fa-user",
        "standings": "fas fa-chart-line",
        "standings.StandingRow": "fas fa-list-ol",
        "users": "fas fa-id-badge",
        "users.UserAccount": "fas fa-id-card",
        "discordbot": "fab fa-discord",
        "discordbot.MatchReport": "fas fa-futbol",
    },

    "show_ui_builder": False,
    "changeform_format": "horizontal_tabs",
    "related_modal_active": True,
    "show_sidebar": True,
}

JAZZMIN_UI_TWEAKS = {
    "theme": "flatly",
    "dark_mode_theme": None,
    "navbar": "navbar-white navbar-light",
    "sidebar": "sidebar-dark-primary",
    "brand_colour": "navbar-primary",
    "accent": "accent-primary",
    "fixed_sidebar": True,
    "sidebar_nav_small_text": False,
    "sidebar_nav_flat_style": False,
    "login_logo": None,
}
