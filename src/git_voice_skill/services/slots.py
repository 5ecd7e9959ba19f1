"""Slot value extraction."""

from ..models.alexa import AlexaRequest


def extract_slots(request: AlexaRequest) -> dict[str, str]:
    """Return the filled slots of an intent request as name -> value.

    Slots the user left unfilled arrive without a value and are omitted.
    """
    if request.intent is None or not request.intent.slots:
        return {}

    return {
        name: slot.value
        for name, slot in request.intent.slots.items()
        if slot.value is not None
    }
