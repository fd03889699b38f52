# Services package init
"""
NoteKeeper Backend - Services Package
=======================================

What:  Business logic layer, independent of HTTP concerns.

Service Inventory:
    - note_service.py: NoteService, the Note Store (list/create/get/update/remove)
"""
