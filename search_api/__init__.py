"""
Member search API: SQLAlchemy models, query repositories and FastAPI routers.
"""
