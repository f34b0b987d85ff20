"""
FastAPI routers grouped by concern (playlist, brightness).

Each module exposes an APIRouter that app.py includes. Endpoints stay thin and
delegate to PlaylistService found on app.state.
"""
