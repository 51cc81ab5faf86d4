import logging
import os

import firebase_admin
from firebase_admin import credentials, messaging

logger = logging.getLogger(__name__)


def init_firebase(cred_path=None):
    """Initialize Firebase Admin only once; later calls are no-ops."""
    if firebase_admin._apps:
        return firebase_admin.get_app()

    cred_path = cred_path or os.getenv("FIREBASE_CREDENTIALS_PATH", "firebase/firebase-adminsdk.json")
    if not os.path.exists(cred_path):
        raise RuntimeError(
            f"Firebase credentials not found at: {cred_path}. "
            "Set FIREBASE_CREDENTIALS_PATH or place the service account file there."
        )

    app = firebase_admin.initialize_app(credentials.Certificate(cred_path))
    logger.info("Firebase Admin initialized")
    return app


def send_push(token, title, body, cred_path=None):
    """Send one FCM message to a device token and return the message id."""
    init_firebase(cred_path)
    message = messaging.Message(
        token=token,
        notification=messaging.Notification(title=title, body=body),
    )
    message_id = messaging.send(message)
    logger.info("Push message sent: %s", message_id)
    return message_id
