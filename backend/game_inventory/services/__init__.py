# Services package init
"""
Game Inventory — Services Layer
================================

What:  Business logic between routes (HTTP) and the store (persistence).
How:   Each service is constructed with an InventoryStore and returns typed
       records, urls to redirect to, or raises application exceptions.

Service Inventory:
    - ConsoleService: console list, detail, create, update, guarded delete
    - GameService: home counts, game list, detail, create, update, delete
"""
