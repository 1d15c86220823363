"""
auth — User authentication module.

Provides:
  • Signed token issuance & verification
  • Password hashing (bcrypt, configurable work factor)
  • Signup / Login API routes
  • ``get_current_username`` FastAPI dependency
"""
