"""
auth: User authentication module.

Provides:
  • Signed token creation & verification
  • Password hashing (bcrypt)
  • Signup / signin service and API routes
  • ``get_current_user_id`` FastAPI dependency (the token guard)
"""
