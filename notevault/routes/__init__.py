"""
NoteVault Backend — API Routes Package
======================================

Route Inventory:
    - auth.py:    POST /auth/signup, POST /auth/signin         (public)
    - users.py:   GET /users/me, PATCH /users                  (auth required)
    - notes.py:   GET/POST /notes, GET/PATCH/DELETE /notes/{id} (auth required)
    - health.py:  GET /health                                   (public)

Routes stay thin: validate the body, call a service, return its result.
"""
