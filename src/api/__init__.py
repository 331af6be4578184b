"""API — camada de borda.

Responsabilidades:
- Receber requests WebPush (routes/)
- Validar path e headers de criptografia (validators/)
- Codificar payloads e montar mensagens FCM (payload_builders/)

NÃO PODE conter: fila, workers ou IO com o backend de push.
"""
