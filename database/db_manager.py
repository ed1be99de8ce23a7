import json
import logging
import os
import stat
import tempfile
import threading

from backend.errors import EmailExistsError, StoreError

USERS_FILE = 'users.json'

logger = logging.getLogger(__name__)


class UserStore:
    """
    Quản lý file users.json (JSON array các user record).

    - File chưa tồn tại = danh sách rỗng, không phải lỗi.
    - Mỗi lần ghi là ghi lại toàn bộ danh sách (indent 2 space).
    - add_user() giữ lock trong suốt load -> kiểm tra trùng -> append -> save.
    """

    def __init__(self, path: str = USERS_FILE):
        self.path = path
        self._lock = threading.Lock()

    def load(self) -> list[dict]:
        """Đọc toàn bộ users từ file. Raises StoreError nếu đọc/parse lỗi."""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = f.read()
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StoreError(f"Error reading {self.path}: {e}") from e

        try:
            users = json.loads(data)
        except ValueError as e:
            raise StoreError(f"Error parsing {self.path}: {e}") from e

        if not isinstance(users, list) or not all(isinstance(u, dict) for u in users):
            raise StoreError(f"{self.path} is not a JSON array of user records")
        return users

    def save(self, users: list[dict]) -> None:
        """
        Ghi đè toàn bộ danh sách users vào file.

        Ghi ra file tạm cùng thư mục rồi os.replace() sang file thật,
        nên file users.json luôn là bản cũ hoặc bản mới đầy đủ.
        """
        directory = os.path.dirname(os.path.abspath(self.path))
        payload = json.dumps(users, indent=2, ensure_ascii=False)
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix='.users-', suffix='.tmp', dir=directory)
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(payload)
            # mkstemp tạo file 0600; giữ nguyên quyền của users.json cũ nếu có
            if os.path.exists(self.path):
                os.chmod(tmp_path, stat.S_IMODE(os.stat(self.path).st_mode))
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StoreError(f"Error writing to {self.path}: {e}") from e

    @staticmethod
    def find_by_email(users: list[dict], email) -> dict | None:
        """Trả về record đầu tiên có email khớp chính xác (phân biệt hoa thường)."""
        return next((u for u in users if u.get('email') == email), None)

    def get_user(self, email) -> dict | None:
        return self.find_by_email(self.load(), email)

    def add_user(self, record: dict) -> None:
        """Thêm user mới. Raises EmailExistsError nếu email đã có, StoreError nếu I/O lỗi."""
        with self._lock:
            users = self.load()
            if self.find_by_email(users, record['email']) is not None:
                raise EmailExistsError()
            users.append(record)
            self.save(users)
        logger.debug("Stored user record #%d in %s", len(users), self.path)


def load_users(path: str = USERS_FILE) -> list[dict]:
    return UserStore(path).load()


def save_users(users: list[dict], path: str = USERS_FILE) -> None:
    UserStore(path).save(users)
