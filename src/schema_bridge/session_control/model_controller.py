"""Controller mediating between a live model graph and a JSON-speaking UI."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from schema_bridge.bridge_errors import SchemaNotFoundError
from schema_bridge.model_paths import ModelPath
from schema_bridge.projection import JsonObject, Projector
from schema_bridge.schema_management import SchemaRegistry

from .session_models import EventHandler, EventRecord, EventSink, InboundEvent

_LOGGER = logging.getLogger(__name__)

GET_MODEL_EVENT = "GetModel"
MODEL_LOADED_EVENT = "ModelLoaded"
ERROR_EVENT = "Error"


class ControllerError(Exception):
    """Raised for controller misuse."""


class NoRootObjectError(ControllerError):
    """Raised when an operation needs a root object and none is set."""


class UnknownRootClassError(ControllerError):
    """Raised when a root object's class has no registered schema."""


class MethodNotFoundError(ControllerError):
    """Raised when an invoked method does not exist on the target object."""


class ModelController:
    """Owns the root object of a session and routes UI events to handlers.

    Events are routed through an explicit handler table keyed by event type.
    Outbound events go to the event sink when one is connected and are kept
    in an in-memory log otherwise.
    """

    def __init__(self, registry: SchemaRegistry, *, event_sink: EventSink | None = None) -> None:
        self._registry = registry
        self._projector = Projector(registry)
        self._event_sink = event_sink
        self._event_log: list[EventRecord] = []
        self._handlers: dict[str, EventHandler] = {GET_MODEL_EVENT: self._handle_get_model}
        self._root: Any = None

    @property
    def root(self) -> Any:
        return self._root

    @property
    def has_root(self) -> bool:
        return self._root is not None

    @property
    def is_connected(self) -> bool:
        return self._event_sink is not None

    @property
    def event_log(self) -> tuple[EventRecord, ...]:
        return tuple(self._event_log)

    def set_root(self, root: Any) -> None:
        """Use root as the session model; its class must have a registered schema."""
        try:
            schema = self._registry.schema_for_object(root)
        except SchemaNotFoundError as exc:
            raise UnknownRootClassError(
                f"Root object must be a type defined in the schema registry: {exc}"
            ) from exc
        _LOGGER.debug("Root object set to %s", schema.type_key)
        self._root = root

    def reset_root(self) -> None:
        self._root = None

    def resolve(self, object_path: str) -> Any:
        """Return the object at object_path under the root ("" is the root)."""
        return ModelPath(object_path).resolve(self._require_root())

    def invoke(self, object_path: str, method_name: str, *args: Any, **kwargs: Any) -> Any:
        """Call method_name on the object at object_path and return its result."""
        target = self.resolve(object_path)
        method = getattr(target, method_name, None)
        if not callable(method):
            raise MethodNotFoundError(
                f"Method '{method_name}' not found on object at path '{object_path}'."
            )
        return method(*args, **kwargs)

    def to_json(self, property_names: Sequence[str] | None = None) -> JsonObject:
        """Project the root object, optionally restricted to property_names."""
        return self._projector.project_object(self._require_root(), property_names)

    def notify(self, event_name: str, data: Any = None) -> None:
        """Send an outbound event, or log it when no sink is connected."""
        payload = {} if data is None else data
        _LOGGER.debug("Sending event %s", event_name)
        if self._event_sink is not None:
            self._event_sink.send_event(event_name, payload)
            return
        self._event_log.append(EventRecord(event_name=event_name, data=payload))

    def clear_event_log(self) -> None:
        self._event_log.clear()

    def register_handler(self, event_type: str, handler: EventHandler) -> None:
        """Route inbound events of event_type to handler (replacing any previous one)."""
        self._handlers[event_type] = handler

    def dispatch(self, event: InboundEvent | Mapping[str, Any]) -> Any:
        """Run the handler registered for an inbound event.

        Handler failures are reported to the UI as an ``Error`` event and
        then re-raised. Events without a handler are logged and ignored.
        """
        inbound = event if isinstance(event, InboundEvent) else InboundEvent.from_mapping(event)
        _LOGGER.debug("Received event %s", inbound.event_type)
        handler = self._handlers.get(inbound.event_type)
        if handler is None:
            _LOGGER.warning("No handler registered for event '%s'", inbound.event_type)
            return None
        try:
            return handler(inbound.args)
        except Exception as exc:
            self.notify(ERROR_EVENT, {"message": str(exc), "event": inbound.event_type})
            raise

    def _handle_get_model(self, _args: Mapping[str, Any]) -> JsonObject:
        model = self.to_json() if self.has_root else {}
        self.notify(MODEL_LOADED_EVENT, model)
        return model

    def _require_root(self) -> Any:
        if self._root is None:
            raise NoRootObjectError("Root object not set. Call set_root first.")
        return self._root
