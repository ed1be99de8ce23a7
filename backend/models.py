from datetime import datetime, timezone

from werkzeug.security import generate_password_hash, check_password_hash


def utc_timestamp() -> str:
    """ISO-8601 UTC, millisecond precision, hậu tố 'Z' (vd: 2026-10-19T08:15:30.123Z)."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def new_user_record(email, password, hash_password: bool = False) -> dict:
    """Tạo user record {email, password, timestamp} để append vào users.json."""
    return {
        'email': email,
        # JSON body có thể gửi password là số -> hash dạng chuỗi
        'password': generate_password_hash(str(password)) if hash_password else password,
        'timestamp': utc_timestamp(),
    }


def password_matches(user: dict, password, hash_password: bool = False) -> bool:
    stored = user.get('password')
    if hash_password:
        if not isinstance(stored, str):
            return False
        return check_password_hash(stored, str(password))
    return stored == password
