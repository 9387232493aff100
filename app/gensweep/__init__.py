"""gensweep - remove stale output left behind by code generators."""

__version__ = "0.1.0"
