"""
This library provides a small set of schema classes that make it easier to build the
JSON-style schemas we validate settings files with.
"""
import inspect

import stringcase

from enum import Enum, auto
from typing import Any, Optional, Union


class SchemaType(Enum):
    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    INTEGER = auto()


class Schema(object):
    def __init__(self, of_type: SchemaType):
        self._spec = {'type': of_type.name.lower()}

    def spec(self):
        return self._spec

    def _set(self, value):
        # The constraint name is derived from the calling method's name.
        name = stringcase.camelcase(inspect.stack()[1].function)
        self._spec[name] = Schema._to_spec(value)
        return self

    @staticmethod
    def _to_spec(value: Any) -> Any:
        if isinstance(value, Schema):
            value = value.spec()
        if isinstance(value, dict):
            value = {key: Schema._to_spec(item) for key, item in value.items()}
        return value


class StringSchema(Schema):
    def __init__(self, min_length: Optional[int] = None, pattern: Optional[str] = None):
        super().__init__(of_type=SchemaType.STRING)
        if min_length is not None:
            self.min_length(min_length)
        if pattern is not None:
            self.pattern(pattern)

    def min_length(self, value: int):
        return self._set(value)

    def pattern(self, value: str):
        return self._set(value)


class IntegerSchema(Schema):
    def __init__(self, minimum: Optional[int] = None):
        super().__init__(of_type=SchemaType.INTEGER)
        if minimum is not None:
            self.minimum(minimum)

    def minimum(self, value: int):
        return self._set(value)


class ObjectSchema(Schema):
    def __init__(self, additional_properties: Union[bool, dict, Schema, None] = None):
        super().__init__(of_type=SchemaType.OBJECT)
        if additional_properties is not None:
            self.additional_properties(additional_properties)

    def properties(self, **kwargs):
        return self._set(dict(kwargs))

    def additional_properties(self, value: Union[bool, dict, Schema]):
        return self._set(value)


class ArraySchema(Schema):
    def __init__(self, items: Union[dict, Schema, None] = None, unique_items: Optional[bool] = None):
        super().__init__(of_type=SchemaType.ARRAY)
        if items is not None:
            self.items(items)
        if unique_items is not None:
            self.unique_items(unique_items)

    def items(self, value: Union[dict, Schema]):
        return self._set(value)

    def unique_items(self, value: bool):
        return self._set(value)
