"""Entities, their components, and the event processors that drive them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from types import MappingProxyType
from typing import Mapping, Optional, Type, TypeVar, Union

from .vector import Vec2

Param = Union[int, float]


class Depth(IntEnum):
    """Rendering depths; a smaller value is nearer the camera and drawn later."""

    PHYSICS_WORLD = 0
    EDITOR = -999999
    EDITOR_DEVICE = -1000 - 100
    EDITOR_DEVICE_CONNECTOR_RENDERER = -1000 - 100 + 1
    DEVICE = -1000
    DEVICE_CONNECTOR_RENDERER = -1000 + 1
    MACHINE = -1000 - 1
    SMOKE_EMITTER = -1000 - 2


class EventFlag(IntFlag):
    NOTHING = 0
    BEFORE_UPDATE = 1 << 0
    UPDATE = 1 << 1
    AFTER_UPDATE = 1 << 2
    RENDER = 1 << 3
    ENTERED_VIEW = 1 << 4
    LEFT_VIEW = 1 << 5
    WINDOW_RESIZED = 1 << 6


_SINGLE_FLAGS = tuple(flag for flag in EventFlag if flag is not EventFlag.NOTHING)
_PARAM_COUNT = 2


@dataclass
class Event:
    """An event handed to components; update events carry the frame time in ``params[0]``."""

    flag: EventFlag = EventFlag.NOTHING
    params: list = field(default_factory=lambda: [0] * _PARAM_COUNT)


class EntityComponent(ABC):
    """Behaviour attached to an entity."""

    def __init__(self) -> None:
        self.entity: Optional["Entity"] = None

    def construct(self, entity: "Entity") -> None:
        self.entity = entity

    def initialize(self) -> None:
        """Called after construction."""

    def on_shutdown(self) -> None:
        """Called before the component is removed."""

    @abstractmethod
    def event_flags(self) -> EventFlag:
        """The events this component wants to receive."""

    @abstractmethod
    def process_event(self, event: Event) -> None:
        """Handle one event."""


class EventProcessor:
    """Delivers one kind of event to its components, in no particular order."""

    def __init__(self, flag: EventFlag) -> None:
        self.event = Event(EventFlag(flag))
        self._components: dict[EntityComponent, None] = {}

    @property
    def components(self) -> tuple[EntityComponent, ...]:
        return tuple(self._components)

    def set_param(self, index: int, value: Param) -> None:
        if not 0 <= index < _PARAM_COUNT:
            raise IndexError(f"event parameter index must be below {_PARAM_COUNT}")
        self.event.params[index] = value

    def set_params(self, *args: Param) -> None:
        if len(args) > _PARAM_COUNT:
            raise IndexError(f"an event holds at most {_PARAM_COUNT} parameters")
        self.event.params[: len(args)] = args

    def process(self) -> None:
        for component in list(self._components):
            component.process_event(self.event)

    def add(self, component: EntityComponent) -> None:
        self._components[component] = None

    def remove(self, component: EntityComponent) -> None:
        self._components.pop(component, None)


class ImmediateEventProcessor(EventProcessor):
    """Delivers its event at the moment a component is added, and keeps nothing."""

    def add(self, component: EntityComponent) -> None:
        component.process_event(self.event)

    def process(self) -> None:
        pass

    def remove(self, component: EntityComponent) -> None:
        pass


class ZSortEventProcessor(EventProcessor):
    """Delivers its event ordered by entity depth, deepest first."""

    def process(self) -> None:
        def depth(component: EntityComponent) -> int:
            return component.entity.z_depth if component.entity is not None else 0

        for component in sorted(self._components, key=depth, reverse=True):
            component.process_event(self.event)


C = TypeVar("C", bound=EntityComponent)


class Entity:
    """A positioned object that owns at most one component of each type."""

    def __init__(self, entity_id: int, system: Optional["EntitySystem"] = None) -> None:
        self._id = entity_id
        self._system = system
        self.position = Vec2(0.0, 0.0)
        self.scale = Vec2(1.0, 1.0)
        self.rotation = 0.0
        self.z_depth = 0
        self._components: dict[type, EntityComponent] = {}

    @property
    def id(self) -> int:
        return self._id

    def translate(self, offset: Vec2) -> None:
        self.position = self.position + offset

    def scale_by(self, factor: Vec2) -> None:
        self.scale = self.scale * factor

    def rotate(self, angle: float) -> None:
        self.rotation += angle

    def create_component(self, component_type: Type[C]) -> C:
        """Create, initialise and register a component, replacing one of the same type."""
        if component_type in self._components:
            self.remove_component(component_type)
        component = component_type()
        component.construct(self)
        component.initialize()
        if self._system is not None:
            self._system.add_component_to_processors(component)
        self._components[component_type] = component
        return component

    def get_component(self, component_type: Type[C]) -> Optional[C]:
        return self._components.get(component_type)

    def get_or_create_component(self, component_type: Type[C]) -> C:
        existing = self.get_component(component_type)
        return existing if existing is not None else self.create_component(component_type)

    def remove_component(self, component_type: type) -> None:
        component = self._components.pop(component_type, None)
        if component is not None:
            self._shut_down(component)

    def remove_all_components(self) -> None:
        components, self._components = self._components, {}
        for component in components.values():
            self._shut_down(component)

    def _shut_down(self, component: EntityComponent) -> None:
        component.on_shutdown()
        if self._system is not None:
            self._system.remove_component_from_processors(component)


class EntitySystem:
    """Owns all entities and the processor for each event kind."""

    def __init__(self) -> None:
        self._entities: dict[int, Entity] = {}
        self._next_id = 0
        self._processors: dict[EventFlag, EventProcessor] = {
            flag: (ZSortEventProcessor(flag) if flag is EventFlag.RENDER else EventProcessor(flag))
            for flag in _SINGLE_FLAGS
        }

    @property
    def entities(self) -> Mapping[int, Entity]:
        return MappingProxyType(self._entities)

    def processor(self, flag: EventFlag) -> EventProcessor:
        return self._processors[EventFlag(flag)]

    def spawn_entity(self) -> Entity:
        entity = Entity(self._next_id, self)
        self._entities[self._next_id] = entity
        self._next_id += 1
        return entity

    def get_entity(self, entity_id: int) -> Optional[Entity]:
        return self._entities.get(entity_id)

    def remove_entity(self, entity_id: int) -> None:
        entity = self._entities.pop(entity_id, None)
        if entity is not None:
            entity.remove_all_components()

    def add_component_to_processors(self, component: EntityComponent) -> None:
        flags = EventFlag(component.event_flags())
        for flag, processor in self._processors.items():
            if flags & flag:
                processor.add(component)

    def remove_component_from_processors(self, component: EntityComponent) -> None:
        for processor in self._processors.values():
            processor.remove(component)

    def _process_timed(self, flag: EventFlag, frame_time: float) -> None:
        processor = self._processors[flag]
        processor.set_param(0, frame_time)
        processor.process()

    def process_before_update(self, frame_time: float) -> None:
        self._process_timed(EventFlag.BEFORE_UPDATE, frame_time)

    def process_update(self, frame_time: float) -> None:
        self._process_timed(EventFlag.UPDATE, frame_time)

    def process_after_update(self, frame_time: float) -> None:
        self._process_timed(EventFlag.AFTER_UPDATE, frame_time)

    def process_render(self) -> None:
        self._processors[EventFlag.RENDER].process()