"""
repositories/ - Read Access to the Book Store
==============================================
Repositories own the SQL for their tables and hand back `models` value
objects, never raw rows.
"""
