# Routes package init
"""
Game Inventory — Routes Package
================================

Route Inventory:
    - games.py:     GET  /                      (home page counts)
                    GET  /games                 (game list)
                    GET|POST /game/create
                    GET  /game/{id}
                    GET|POST /game/{id}/update
                    GET|POST /game/{id}/delete
    - consoles.py:  GET  /consoles              (console list)
                    GET|POST /console/create
                    GET  /console/{id}
                    GET|POST /console/{id}/update
                    GET|POST /console/{id}/delete
    - health.py:    GET  /health                (JSON health probe)

Design Principle:
    Routes stay thin: read the form, call the service, render or redirect.
"""
