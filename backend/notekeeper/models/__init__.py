# Models package init
"""
NoteKeeper Backend - ORM Models Package
=========================================

What:  SQLAlchemy mapped classes; each one owns a table.

Inventory:
    - note.py: Note (table `notes`, index `idx_notes_title`)
"""
