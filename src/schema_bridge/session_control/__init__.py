"""Session control exports."""

from .model_controller import (
    ERROR_EVENT,
    GET_MODEL_EVENT,
    MODEL_LOADED_EVENT,
    ControllerError,
    MethodNotFoundError,
    ModelController,
    NoRootObjectError,
    UnknownRootClassError,
)
from .session_models import EventHandler, EventRecord, EventSink, InboundEvent

__all__ = [
    "ERROR_EVENT",
    "GET_MODEL_EVENT",
    "MODEL_LOADED_EVENT",
    "ControllerError",
    "EventHandler",
    "EventRecord",
    "EventSink",
    "InboundEvent",
    "MethodNotFoundError",
    "ModelController",
    "NoRootObjectError",
    "UnknownRootClassError",
]
