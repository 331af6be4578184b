"""Adapter do Firebase Cloud Messaging."""

from app.infra.fcm.sender import FirebaseDeliveryClient, to_fcm_message

__all__ = ["FirebaseDeliveryClient", "to_fcm_message"]
