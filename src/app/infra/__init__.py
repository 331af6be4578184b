"""Infra: implementações concretas de IO (backends externos)."""
