"""Validators por origem — validação de requests recebidos na borda.

Estrutura:
- webpush/: requests WebPush (aesgcm) destinados ao FCM

Cada origem tem seus próprios validators, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
