from .db_manager import UserStore, load_users, save_users

__all__ = ['UserStore', 'load_users', 'save_users']
