# Routes package init
"""
NoteKeeper Backend - API Routes Package
=========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - notes.py:   GET    /notes          (list notes ordered by title)
                  POST   /notes          (create note)
                  GET    /notes/{id}     (get single note)
                  PUT    /notes/{id}     (partial update)
                  DELETE /notes/{id}     (delete note)
    - health.py:  GET    /health         (service health check)

Design Principle:
    Routes are THIN: they parse the request, call the service once, and
    set the status code. Business logic belongs in services.
"""
