"""
NoteVault Backend — Services Layer
==================================

What:  Business logic between routes (HTTP) and repositories (persistence).
How:   Services receive their collaborators through the constructor and are
       assembled per request in notevault/dependencies.py.

Service Inventory:
    - PasswordHasher / TokenIssuer (abstract): security primitives
    - BcryptPasswordHasher: bcrypt credential hashing
    - JWTTokenIssuer: signed, time-bounded access tokens
    - AuthService: sign-up / sign-in
    - NoteService: owner-scoped note CRUD
    - UserService: profile edits
"""
