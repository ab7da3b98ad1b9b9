"""FastAPI application and routes.

This module provides the REST API for solar event calculations.

## API Structure

- /health - Liveness check
- /api/solar/day-length - Hours the Sun spends above an event altitude
- /api/solar/rise-set - Rise and set of an event in UTC
- /api/solar/twilight - Sunrise, sunset, solar noon and all twilight boundaries
- /api/solar/position - Sun altitude and azimuth at an instant

All endpoints are read-only and stateless.
"""

from solar_events.api.app import create_app

__all__ = ["create_app"]
