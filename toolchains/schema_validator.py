"""
This library provides a schema validator class.  It understands the subset of JSON
schema that our schema classes can produce.
"""
import re
from typing import Any, Dict, Union

import stringcase

from toolchains.schema import Schema


def _is_object(thing: Any) -> bool:
    return isinstance(thing, dict)


def _is_array(thing: Any) -> bool:
    return isinstance(thing, list)


def _is_string(thing: Any) -> bool:
    return isinstance(thing, str)


def _is_integer(thing: Any) -> bool:
    # Note that ``True`` is not an integer here, unlike in Python proper.
    return isinstance(thing, int) and not isinstance(thing, bool)


_type_checks = {
    'object': (_is_object, 'an object'),
    'array': (_is_array, 'an array'),
    'string': (_is_string, 'a string'),
    'integer': (_is_integer, 'an integer'),
}


class SchemaValidator(object):
    """
    This class represents an object that wraps a schema definition and uses it to validate
    values.  When validation fails, the reason is available in the ``error`` attribute.
    """
    def __init__(self, schema: Union[Schema, dict]):
        """
        This function creates a new schema validator around a schema which may be specified
        as either a ``Schema`` object or a raw dictionary.

        :param schema: the schema to wrap.
        """
        if isinstance(schema, Schema):
            schema = schema.spec()
        elif schema is None:
            raise ValueError('A schema must be specified.')

        self.error = None
        self._schema = schema

    def validate(self, value, path: str = '') -> bool:
        path = '#' if path == '' else f'#/{path}'
        self.error = self._validate(value, schema=self._schema, path=path)

        return self.error is None

    def _validate(self, value, schema: Dict[str, Any], path: str):
        for key in schema.keys():
            call = getattr(self, f'_validate_{stringcase.snakecase(key)}')
            error = call(value, schema, schema[key], path)

            if error is not None:
                if ' constraint: ' not in error:
                    error = f'{"#/" if path == "#" else path} violates the "{key}" constraint: {error}'

                return error

        return None

    # noinspection PyMethodMayBeStatic,PyUnusedLocal
    def _validate_type(self, value, schema, constraint, path):
        check, description = _type_checks[constraint]

        if not check(value):
            return f'it is not {description}.'

    # ------------------ #
    # String validations #
    # ------------------ #
    # noinspection PyMethodMayBeStatic,PyUnusedLocal
    def _validate_min_length(self, value, schema, constraint, path):
        if _is_string(value) and len(value) < constraint:
            return f'the string is shorter than {constraint}.'

    # noinspection PyMethodMayBeStatic,PyUnusedLocal
    def _validate_pattern(self, value, schema, constraint, path):
        if _is_string(value) and not re.match(constraint, value):
            return f'it does not match the \'{constraint}\' pattern.'

    # ------------------- #
    # Integer validations #
    # ------------------- #
    # noinspection PyMethodMayBeStatic,PyUnusedLocal
    def _validate_minimum(self, value, schema, constraint, path):
        if _is_integer(value) and value < constraint:
            return f'{value} is less than {constraint}.'

    # ------------------ #
    # Object validations #
    # ------------------ #
    def _validate_properties(self, value, schema, constraint, path):
        return self._handle_property_validation(value, constraint, self._get_additional_schema(schema), path)

    # noinspection PyUnusedLocal
    def _validate_additional_properties(self, value, schema, constraint, path):
        # if present, the properties constraint will do the real validation.
        if 'properties' in schema:
            return None

        return self._handle_property_validation(value, {}, self._get_additional_schema(schema), path)

    @staticmethod
    def _get_additional_schema(schema):
        additional = schema.get('additionalProperties', True)

        if isinstance(additional, bool):
            additional = {} if additional else None

        return additional

    def _handle_property_validation(self, value, specific_props, additional_props, path):
        if not _is_object(value):
            return None

        for name, child in value.items():
            name = str(name)
            child_schema = specific_props.get(name, additional_props)

            if child_schema is None:
                return f'the {name} property is not allowed here.'

            error = self._validate(child, child_schema, f'{path}/{name}')

            if error is not None:
                return error

        return None

    # ----------------- #
    # Array validations #
    # ----------------- #
    # noinspection PyUnusedLocal
    def _validate_items(self, value, schema, constraint, path):
        if _is_array(value):
            for index, item in enumerate(value):
                error = self._validate(item, constraint, f'{path}/[{index}]')

                if error is not None:
                    return error

    # noinspection PyMethodMayBeStatic,PyUnusedLocal
    def _validate_unique_items(self, value, schema, constraint, path):
        if _is_array(value) and constraint:
            seen = []

            for item in value:
                if item in seen:
                    return f'the array contains {item} more than once.'

                seen.append(item)
