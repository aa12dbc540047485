"""HRDesk - employee directory API with signup/login.

Layers:
    hrdesk/
    ├── domain/          # Aggregates, repository interfaces, error taxonomy
    ├── application/     # Validation and operation handlers
    ├── infrastructure/  # SQLAlchemy persistence
    └── presentation/    # FastAPI transport and Typer CLI
"""

__version__ = "1.0.0"
