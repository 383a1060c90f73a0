"""Discover the input fields a route handler validates.

A handler method "has a validation object" when one of its parameters is
annotated with either a pydantic model or a form-request style class that
exposes a ``rules()`` method returning a mapping of field name to rules.
"""

import importlib
import inspect
import logging
import typing
from collections.abc import Mapping
from typing import Protocol

from pydantic import BaseModel

from route_postman.routes.base import HandlerRef

logger = logging.getLogger(__name__)


class RuleProvider(Protocol):
    """Looks up the validated field names of a controller method."""

    def fields_for(self, controller: str, method: str) -> list[str] | None:
        ...


class StaticRuleProvider:
    """Rule provider backed by a precomputed ``{"module.Class@method": [fields]}`` map."""

    def __init__(self, fields: dict[str, list[str]]):
        self.fields = fields

    def fields_for(self, controller: str, method: str) -> list[str] | None:
        return self.fields.get(str(HandlerRef(controller=controller, method=method)))


class SignatureRuleProvider:
    """Rule provider that inspects the handler method's type hints.

    Any lookup failure (unknown module, class or method, unresolvable hints,
    no validation parameter, no rules) yields ``None``.
    """

    def fields_for(self, controller: str, method: str) -> list[str] | None:
        try:
            cls = import_object(controller)
        except Exception as e:  # importing runs application code
            logger.debug("Cannot import controller %s: %s", controller, e)
            return None

        func = getattr(cls, method, None)
        if func is None or not callable(func):
            logger.debug("Controller %s has no method %s", controller, method)
            return None

        validator = self._find_validation_type(func)
        if validator is None:
            return None
        return validated_fields(validator)

    def _find_validation_type(self, func) -> type | None:
        try:
            hints = typing.get_type_hints(func)
        except Exception as e:  # unresolved forward references raise NameError and friends
            logger.debug("Cannot resolve type hints of %r: %s", func, e)
            return None

        try:
            parameters = inspect.signature(func).parameters
        except (TypeError, ValueError) as e:
            logger.debug("Cannot read signature of %r: %s", func, e)
            return None

        found = None
        # The last matching parameter wins
        for name in parameters:
            annotation = hints.get(name)
            if is_validation_type(annotation):
                found = annotation
        return found


def import_object(path: str):
    """Import ``package.module.Name`` or ``package.module:Name``."""
    if ":" in path:
        module_name, _, attr = path.partition(":")
    else:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ValueError(f"Not a dotted object path: {path!r}")
    module = importlib.import_module(module_name)
    obj = module
    for part in attr.split("."):
        obj = getattr(obj, part)
    return obj


def is_validation_type(annotation) -> bool:
    if not inspect.isclass(annotation):
        return False
    if issubclass(annotation, BaseModel):
        return annotation is not BaseModel
    return callable(getattr(annotation, "rules", None))


def validated_fields(validator: type) -> list[str] | None:
    """Field names declared by a validation type, in declaration order."""
    if issubclass(validator, BaseModel):
        return [field.alias or name for name, field in validator.model_fields.items()]

    try:
        rules = validator().rules()
    except Exception as e:  # application code, any failure means "no fields"
        logger.debug("Calling %s.rules() failed: %s", validator.__name__, e)
        return None

    if not isinstance(rules, Mapping):
        logger.debug("%s.rules() did not return a mapping", validator.__name__)
        return None
    return [str(key) for key in rules]
