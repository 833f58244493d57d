"""
Adapter Django - backend relacional (ORM + migrations).
"""
