"""Integer parameters of the processor and the store that owns them."""

from __future__ import annotations

import math
import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterable, Iterator

Listener = Callable[[str, float], None]

_PARAM_TAG = "PARAM"


class IntParameter:
    """An integer parameter in a closed range, notifying listeners on change."""

    def __init__(
        self,
        parameter_id: str,
        name: str,
        min_value: int,
        max_value: int,
        default_value: int,
    ) -> None:
        if min_value >= max_value:
            raise ValueError(f"invalid range {min_value}..{max_value} for {parameter_id}")
        if not min_value <= default_value <= max_value:
            raise ValueError(f"default {default_value} outside range for {parameter_id}")
        self.parameter_id = parameter_id
        self.name = name
        self.min_value = min_value
        self.max_value = max_value
        self.default_value = default_value
        self._value = default_value
        self._listeners: list[Listener] = []

    def __repr__(self) -> str:
        return f"IntParameter({self.parameter_id!r}, value={self._value})"

    @property
    def value(self) -> int:
        return self._value

    def num_steps(self) -> int:
        """Number of distinct values the parameter can take."""
        return self.max_value - self.min_value + 1

    def normalized(self) -> float:
        """The current value mapped to the range 0..1."""
        return (self._value - self.min_value) / (self.max_value - self.min_value)

    def set_value_notifying_host(self, normalized: float) -> None:
        """Set the value from a 0..1 position and notify listeners if it changed."""
        position = min(max(float(normalized), 0.0), 1.0)
        raw = self.min_value + position * (self.max_value - self.min_value)
        self._assign(math.floor(raw + 0.5))

    def add_listener(self, listener: Listener) -> None:
        """Register ``listener(parameter_id, new_value)``."""
        self._listeners.append(listener)

    def _assign(self, value: int) -> None:
        value = min(max(value, self.min_value), self.max_value)
        if value == self._value:
            return
        self._value = value
        for listener in list(self._listeners):
            listener(self.parameter_id, float(value))


class ParameterStore:
    """Owns the parameters by identifier and serialises their state."""

    def __init__(self, state_type: str, parameters: Iterable[IntParameter]) -> None:
        self.state_type = state_type
        self._parameters: dict[str, IntParameter] = {}
        for parameter in parameters:
            if parameter.parameter_id in self._parameters:
                raise ValueError(f"duplicate parameter id {parameter.parameter_id!r}")
            self._parameters[parameter.parameter_id] = parameter

    def __iter__(self) -> Iterator[IntParameter]:
        return iter(self._parameters.values())

    def __len__(self) -> int:
        return len(self._parameters)

    def __contains__(self, parameter_id: object) -> bool:
        return parameter_id in self._parameters

    def get_parameter(self, parameter_id: str) -> IntParameter:
        try:
            return self._parameters[parameter_id]
        except KeyError:
            raise KeyError(f"unknown parameter {parameter_id!r}") from None

    def add_parameter_listener(self, parameter_id: str, listener: Listener) -> None:
        self.get_parameter(parameter_id).add_listener(listener)

    def copy_state(self) -> ET.Element:
        """Snapshot every parameter value as an XML element."""
        root = ET.Element(self.state_type)
        for parameter in self._parameters.values():
            ET.SubElement(
                root, _PARAM_TAG, {"id": parameter.parameter_id, "value": str(parameter.value)}
            )
        return root

    def replace_state(self, state: ET.Element) -> None:
        """Restore values from a snapshot; unknown ids are ignored, missing ones kept."""
        for child in state.findall(_PARAM_TAG):
            parameter = self._parameters.get(child.get("id", ""))
            raw = child.get("value")
            if parameter is None or raw is None:
                continue
            parameter._assign(math.floor(float(raw) + 0.5))