# Middleware package init
"""
Game Inventory — Middleware Package
====================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → Route Handler

    The request id is assigned first so the access log line and any error
    page rendered for the request can include it.
"""
