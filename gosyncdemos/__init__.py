"""Semaphores, a read/write lock, a barrier, closable pipes and small concurrency demos."""

__version__ = "0.1.0"