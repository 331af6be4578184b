"""Despacho assíncrono: fila limitada + pool fixo de workers."""

from app.dispatch.queue import DispatchQueue
from app.dispatch.worker_pool import WorkerPool

__all__ = ["DispatchQueue", "WorkerPool"]
