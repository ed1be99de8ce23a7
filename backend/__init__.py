"""
BACKEND PACKAGE INITIALIZATION FILE

Flask backend cho hệ thống signup/login dùng file users.json.
Entry point: backend.app.create_app() / backend.app.main().
"""
