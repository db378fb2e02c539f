"""Adapters for the domain protocols: SQLAlchemy persistence, structlog
logging and the regex phone number validator."""
