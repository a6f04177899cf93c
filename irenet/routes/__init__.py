# Routes package init
"""
Irenet Backend — API Routes Package
===================================

Route Inventory:
    - health.py:         GET  /                              (welcome message)
                         GET  /api/health                    (database probe)
    - users.py:          GET  /api/users, /api/users/{id};  POST /api/users
    - organizations.py:  GET  /api/organizations;           POST /api/organizations
    - donations.py:      GET  /api/donations, /api/donations/status/{status}
                         POST /api/donations;               PATCH /api/donations/{id}
    - item_requests.py:  same four routes under /api/requests
    - matches.py:        GET  /api/matches;                 POST /api/matches

Routes stay thin: parse the body, call one service method, wrap the result
in the `{"success": true, ...}` envelope. Errors are raised, never
returned, and shaped by the handlers in main.py.
"""
