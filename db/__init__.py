"""
db/ - Book Store Database
=========================
The psycopg2 pool (`db.connection`) and the authors/books schema with its
seed rows (`db.init_db`). Nothing here knows about domain models.
"""
