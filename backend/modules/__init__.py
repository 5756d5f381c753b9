"""
Feature modules for the Shop backend.

- auth: passwords, tokens, registration/login and ownership checks
- customers: customer accounts (also the credential store)
- products: the public catalog
- orders: customer-owned orders and their items

Each module keeps its protocol in interfaces.py and its Supabase access in
repository.py. Other modules and the API layer depend on the protocol only.
"""
