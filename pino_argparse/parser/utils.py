# Pino Argparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion for typed flag queries.

Flag values are captured as raw strings. `FlagParse.get_flag_value()` converts
them on demand with `coerce_value`, which understands the common annotation
shapes used by handlers: plain types and callables, `bool`, `Enum`, `Literal`,
unions and `datetime`.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string to an Enum member.
- coerce_value: Convert a string to any supported target type.
"""
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

TRUTHY = {"true", "t", "1", "yes", "y", "on"}
FALSY = {"false", "f", "0", "no", "n", "off"}


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Raises:
        ValueError: If the string is not a recognized truthy or falsy word.
    """
    normalized = value.strip().lower()
    if normalized in TRUTHY:
        return True
    if normalized in FALSY:
        return False
    raise ValueError(f"'{value}' is not a valid boolean")


def coerce_enum(value: str, enum_type: EnumMeta) -> Any:
    """
    Convert a string to a member of `enum_type`, by member name first and
    then by value (coerced to the type of the first member's value).
    """
    try:
        return enum_type[value]
    except KeyError:
        pass

    base_type = type(next(iter(enum_type)).value)
    try:
        return enum_type(base_type(value))
    except (ValueError, TypeError):
        choices = ", ".join(str(member.value) for member in enum_type)
        raise ValueError(f"'{value}' should be one of {{{choices}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Convert a raw flag value to `target_type`.

    Args:
        value (str): The captured flag value.
        target_type (Any): A type, a one-argument callable, or a typing
            construct (`Literal[...]`, `X | Y`, `Union[...]`).

    Returns:
        Any: The converted value.

    Raises:
        ValueError: If the value cannot be converted.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        for arg in args:
            if value == str(arg):
                return arg
        raise ValueError(f"'{value}' is not one of {args}")

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            try:
                return coerce_value(value, arg)
            except Exception:
                continue
        raise ValueError(f"'{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"'{value}' could not be parsed as a datetime") from error

    try:
        return target_type(value)
    except ValueError:
        raise
    except Exception as error:
        raise ValueError(f"'{value}' could not be coerced to {target_type}") from error
