"""Business rules for accounts and phone numbers.

Entities, the account status enum, ports (protocols) implemented by
infrastructure, and pure validators. No framework imports.
"""
