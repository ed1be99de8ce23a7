"""
AUTH API ROUTES - FLASK BLUEPRINT

Hai endpoint duy nhất của hệ thống: tạo tài khoản và kiểm tra đăng nhập.
User được lưu trong một file JSON (xem database/db_manager.py).
Body có thể là form url-encoded hoặc JSON. Response luôn là plain text.

VÍ DỤ:
curl -X POST http://localhost:3000/signup -d "email=a@x.com&password=p1"
curl -X POST http://localhost:3000/login -H "Content-Type: application/json" -d "{\"email\": \"a@x.com\", \"password\": \"p1\"}"
"""

import logging

from flask import Blueprint, current_app, request

from backend.errors import (
    AuthBackendError,
    InvalidCredentialsError,
    MissingFieldError,
    StoreError,
)
from backend.models import new_user_record, password_matches

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)


def _text(message: str, status: int):
    return message, status, {'Content-Type': 'text/plain; charset=utf-8'}


def _error_response(error: AuthBackendError, server_message: str):
    if isinstance(error, StoreError):
        logger.error("%s %s", server_message, error, exc_info=error)
        return _text(server_message, error.status_code)
    return _text(error.message, error.status_code)


def _read_credentials():
    """Lấy email/password từ JSON body hoặc form. Raises MissingFieldError."""
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
    else:
        data = request.form

    email = data.get('email')
    password = data.get('password')
    if not email or not password:
        raise MissingFieldError()
    return email, password


def _store():
    return current_app.extensions['user_store']


@auth_bp.route('/signup', methods=['POST'])
def signup():
    """
    TẠO TÀI KHOẢN

      curl -X POST http://localhost:3000/signup -d "email=a@x.com&password=p1"

    201 Signup successful! | 400 thiếu field | 409 email đã tồn tại | 500 lỗi file
    """
    try:
        email, password = _read_credentials()
        record = new_user_record(email, password,
                                 hash_password=current_app.config['PASSWORD_HASHING'])
        _store().add_user(record)
    except AuthBackendError as e:
        return _error_response(e, 'Server error during signup.')

    logger.info("New user signed up: %s", email)
    return _text('Signup successful!', 201)


@auth_bp.route('/login', methods=['POST'])
def login():
    """
    KIỂM TRA ĐĂNG NHẬP

      curl -X POST http://localhost:3000/login -d "email=a@x.com&password=p1"

    200 Login successful! | 400 thiếu field | 401 sai email/mật khẩu | 500 lỗi file
    File users.json chưa tồn tại -> 401 (chưa có user nào), không phải 500.
    """
    try:
        email, password = _read_credentials()
        user = _store().get_user(email)
        if user is None or not password_matches(
                user, password, hash_password=current_app.config['PASSWORD_HASHING']):
            raise InvalidCredentialsError()
    except AuthBackendError as e:
        return _error_response(e, 'Server error during login.')

    logger.info("User logged in: %s", email)
    return _text('Login successful!', 200)
