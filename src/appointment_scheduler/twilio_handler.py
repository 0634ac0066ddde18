"""Twilio client wrapper for outbound SMS."""

from __future__ import annotations

import logging
import os

from twilio.rest import Client

logger = logging.getLogger(__name__)


def get_twilio_client() -> Client:
    sid = os.environ.get("TWILIO_ACCOUNT_SID")
    token = os.environ.get("TWILIO_AUTH_TOKEN")
    if not sid or not token:
        raise ValueError("TWILIO_ACCOUNT_SID and TWILIO_AUTH_TOKEN must be set")
    return Client(sid, token)


def get_from_number() -> str:
    num = os.environ.get("TWILIO_PHONE_NUMBER")
    if not num:
        raise ValueError("TWILIO_PHONE_NUMBER must be set")
    return num


def send_sms(to_phone: str, body: str) -> str | None:
    """Send SMS from TWILIO_PHONE_NUMBER to to_phone. Returns message SID or None on failure."""
    try:
        client = get_twilio_client()
        from_number = get_from_number()
        msg = client.messages.create(to=to_phone, from_=from_number, body=body)
        return msg.sid
    except Exception as exc:  # pragma: no cover - log and swallow, SMS is fire-and-forget
        logger.warning("Failed to send SMS to %s: %r", to_phone, exc)
        return None
