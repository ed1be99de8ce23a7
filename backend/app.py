"""
FLASK APP MAIN ENTRY POINT - AUTH BACKEND SERVER
==================================================

File chính để khởi chạy Auth Backend Server.
Thiết lập Flask app, cấu hình CORS, đăng ký auth routes và phục vụ
thư mục public/ (HTML, CSS, JS) tại root.

CÁC TÍNH NĂNG CHÍNH
- POST /signup, POST /login (backend/routes.py)
- User lưu trong users.json (database/db_manager.py)
- CORS enabled cho frontend integration
- Cấu hình qua create_app(config), biến môi trường AUTH_* hoặc CLI flags

CHẠY SERVER
    auth-backend --port 3000 --users-file users.json
"""
import argparse
import logging
import os

from flask import Flask
from flask_cors import CORS

from backend.routes import auth_bp
from database.db_manager import USERS_FILE, UserStore

DEFAULT_PORT = 3000
DEFAULT_HOST = '0.0.0.0'
# Tương đối với thư mục chạy server, giống USERS_FILE
DEFAULT_PUBLIC_DIR = 'public'

logger = logging.getLogger(__name__)

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


def configure_logging(level=logging.INFO):
    """Log ra console dạng "[INFO] message"."""
    logging.basicConfig(level=level, format='[%(levelname)s] %(message)s')


def load_config(overrides=None) -> dict:
    """
    Gộp cấu hình theo thứ tự ưu tiên: mặc định < biến môi trường < overrides.
    """
    config = {
        'USERS_FILE': os.environ.get('AUTH_USERS_FILE', USERS_FILE),
        'PUBLIC_DIR': os.environ.get('AUTH_PUBLIC_DIR', DEFAULT_PUBLIC_DIR),
        'PORT': int(os.environ.get('AUTH_PORT', DEFAULT_PORT)),
        'HOST': os.environ.get('AUTH_HOST', DEFAULT_HOST),
        'PASSWORD_HASHING': os.environ.get('AUTH_PASSWORD_HASHING', '').lower() in _TRUE_VALUES,
    }
    if overrides:
        config.update(overrides)
    return config


def create_app(config=None) -> Flask:
    """Create and configure the Flask application."""
    config = load_config(config)

    # static_url_path='' -> mọi GET không khớp route nào sẽ tìm file trong public/
    app = Flask(__name__,
                static_folder=os.path.abspath(config['PUBLIC_DIR']),
                static_url_path='')
    app.config.update(config)

    # BẬT CORS: cho phép frontend chạy ở domain/port khác gọi API
    CORS(app)

    app.extensions['user_store'] = UserStore(app.config['USERS_FILE'])
    app.register_blueprint(auth_bp)

    @app.route('/')
    def index():
        return app.send_static_file('index.html')

    return app


def main(argv=None):
    parser = argparse.ArgumentParser(description="JSON-file signup/login server")
    parser.add_argument('--host', help=f"bind address (default {DEFAULT_HOST})")
    parser.add_argument('--port', type=int, help=f"TCP port (default {DEFAULT_PORT})")
    parser.add_argument('--users-file', help=f"user store path (default {USERS_FILE})")
    parser.add_argument('--public-dir', help="static files directory")
    parser.add_argument('--hash-passwords', action='store_true',
                        help="store werkzeug password hashes instead of cleartext")
    parser.add_argument('--debug', action='store_true')
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.debug else logging.INFO)

    overrides = {
        'HOST': args.host,
        'PORT': args.port,
        'USERS_FILE': args.users_file,
        'PUBLIC_DIR': args.public_dir,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if args.hash_passwords:
        overrides['PASSWORD_HASHING'] = True

    app = create_app(overrides)
    port = app.config['PORT']
    logger.info("Server listening on port http://localhost:%d", port)
    app.run(host=app.config['HOST'], port=port, debug=args.debug)


if __name__ == '__main__':
    main()
