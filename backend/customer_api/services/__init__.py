# Services package init
"""
Customer API — Services Layer
==============================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).
Why:   Routes handle HTTP; services handle lookups, writes and not-found rules.

Service Inventory:
    - CustomerService: list / get / create / replace / delete customers
"""
