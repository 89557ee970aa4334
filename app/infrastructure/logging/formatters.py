"""Structlog processors used by the converter's logging setup."""

from typing import Any

from structlog.typing import EventDict, Processor


def add_static_fields(**fields: Any) -> Processor:
    """Return a processor that stamps every event with fixed fields.

    Fields already present on the event win, so a call site can override
    e.g. ``environment`` for a single event.
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in fields.items():
            event_dict.setdefault(key, value)
        return event_dict

    return processor


def truncate_large_values(max_length: int = 500) -> Processor:
    """Return a processor that shortens string fields longer than max_length.

    The kept prefix is followed by a marker with the original length.
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = f"{value[:max_length]}...[{len(value)} chars]"
        return event_dict

    return processor
