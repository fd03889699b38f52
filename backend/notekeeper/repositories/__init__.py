# Repositories package init
"""
NoteKeeper Backend - Repositories Package
===========================================

What:  Data access objects. Each repository method runs a single statement
       (or a read-then-write inside the request transaction).

Inventory:
    - note_repository.py: NoteRepository (abstract) and its SQLAlchemy binding
"""
