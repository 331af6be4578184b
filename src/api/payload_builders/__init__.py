"""Payload builders — construção de mensagens para backends de push.

Estrutura:
- fcm/: Firebase Cloud Messaging (codificação Z85 + PushMessage)
"""

__all__: list[str] = []
