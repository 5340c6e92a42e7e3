"""Decodes push-style trigger notifications into file arrival events."""

import base64
import binascii
import json
from typing import Any

from pydantic import ValidationError

from video_processor.exceptions import TriggerValidationError

from .models import FileArrivalEvent


def decode_trigger(envelope: Any) -> FileArrivalEvent:
    """
    Decodes a notification envelope of the form ``{"message": {"data": <b64>}}``.

    The ``data`` field is base64-encoded UTF-8 JSON that must carry a
    non-empty ``name``. Every failure is reported as a single
    TriggerValidationError; the underlying error is only chained.

    Args:
        envelope: The parsed request body (dict), or raw JSON bytes/str.

    Returns:
        The decoded FileArrivalEvent.

    Raises:
        TriggerValidationError: If any decoding or validation step fails.
    """
    if isinstance(envelope, (bytes, bytearray, str)):
        try:
            envelope = json.loads(envelope)
        except ValueError as e:
            raise TriggerValidationError("envelope is not valid JSON", e) from e

    data = _extract_data(envelope)

    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise TriggerValidationError("data is not valid base64", e) from e

    try:
        payload = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise TriggerValidationError("data is not valid UTF-8", e) from e
    except ValueError as e:
        raise TriggerValidationError("data is not valid JSON", e) from e

    try:
        return FileArrivalEvent.model_validate(payload)
    except ValidationError as e:
        raise TriggerValidationError("missing or invalid file name", e) from e


def _extract_data(envelope: Any) -> str:
    if not isinstance(envelope, dict):
        raise TriggerValidationError("envelope must be a JSON object")
    message = envelope.get("message")
    if not isinstance(message, dict):
        raise TriggerValidationError("no message received")
    data = message.get("data")
    if not isinstance(data, str) or not data:
        raise TriggerValidationError("message has no data")
    return data
