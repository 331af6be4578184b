"""Rotas de relay WebPush."""
