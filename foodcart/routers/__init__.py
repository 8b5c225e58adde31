"""
FastAPI routers grouped by domain (catalog, auth, cart).

Each module exposes an APIRouter included by foodcart.app.create_app. Services
are read from request.app.state so every request shares one repository.
"""
