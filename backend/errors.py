"""
AUTH BACKEND ERRORS

Các lỗi mà route handlers chuyển ngay thành HTTP response.
Mỗi lỗi mang sẵn status code và nội dung text trả về cho client.

  MissingFieldError        -> 400
  InvalidCredentialsError  -> 401
  EmailExistsError         -> 409
  StoreError               -> 500
"""


class AuthBackendError(Exception):
    """Base class: status_code + message gửi cho client."""

    status_code = 500
    message = 'Server error.'

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ClientError(AuthBackendError):
    status_code = 400
    message = 'Bad request.'


class MissingFieldError(ClientError):
    message = 'Email and password are required.'


class ConflictError(AuthBackendError):
    status_code = 409
    message = 'Conflict.'


class EmailExistsError(ConflictError):
    message = 'Email already registered.'


class AuthError(AuthBackendError):
    status_code = 401
    message = 'Unauthorized.'


class InvalidCredentialsError(AuthError):
    # Dùng chung cho "không có email" và "sai mật khẩu"
    message = 'Invalid credentials.'


class StoreError(AuthBackendError):
    """Đọc / parse / ghi file users.json thất bại (không tính file chưa tồn tại)."""
