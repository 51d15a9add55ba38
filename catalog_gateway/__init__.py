"""REST gateway over the transactional, analytics and document stores."""

__version__ = "0.1.0"
