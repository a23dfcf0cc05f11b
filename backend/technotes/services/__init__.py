# Services package init
"""
TechNotes Backend: Services Layer
=================================

What:  Business logic layer sitting between routes (HTTP) and repositories (persistence).
How:   Services receive typed request models and repositories, apply the
       users/notes rules, and return response models or raise application
       exceptions.

Service Inventory:
    - NoteService: note CRUD, owner join, duplicate-title guard
    - UserService: user CRUD, password hashing, owned-notes delete guard
    - PasswordHasher (abstract) / BcryptPasswordHasher: one-way password hashing
"""
