import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest
from gamenight_nav.app import create_app
from gamenight_nav.models import NavConfig
from gamenight_nav.settings import Settings

ADMIN_TOKEN = 'admin-token'
PLAYER_TOKEN = 'player-token'


@pytest.fixture
def settings(tmp_path):
    store_dir = tmp_path / 'navigation_configs'
    store_dir.mkdir()
    return Settings(
        store_dir=store_dir,
        admin_tokens={ADMIN_TOKEN: 'admin', PLAYER_TOKEN: 'player'},
        backup_keep=2,
        log_level='DEBUG',
    )


@pytest.fixture
def app(settings):
    application = create_app(settings)
    application.config['TESTING'] = True
    yield application


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_headers():
    return {'Authorization': f'Bearer {ADMIN_TOKEN}'}


@pytest.fixture
def empty_config():
    return NavConfig(primary_links=[], mega_menus=[])
