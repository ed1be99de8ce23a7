import pytest

from backend.app import create_app


@pytest.fixture
def users_file(tmp_path):
    return tmp_path / 'users.json'


@pytest.fixture
def public_dir(tmp_path):
    public = tmp_path / 'public'
    public.mkdir()
    (public / 'index.html').write_text('<h1>Signup</h1>', encoding='utf-8')
    (public / 'app.js').write_text('console.log("hi");', encoding='utf-8')
    return public


@pytest.fixture
def app(users_file, public_dir):
    app = create_app({
        'TESTING': True,
        'USERS_FILE': str(users_file),
        'PUBLIC_DIR': str(public_dir),
        'PASSWORD_HASHING': False,
    })
    return app


@pytest.fixture
def client(app):
    return app.test_client()
