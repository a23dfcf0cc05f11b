# Routes package init
"""
TechNotes Backend: API Routes Package
=====================================

Route Inventory:
    - users.py:   GET/POST/PATCH/DELETE /users
    - notes.py:   GET/POST/PATCH/DELETE /notes
    - health.py:  GET /health

Routes are thin: they turn the request into a typed body, build the
repositories for the request's session, and call one service method.
PATCH and DELETE carry the record id in the JSON body, not the path.
"""
