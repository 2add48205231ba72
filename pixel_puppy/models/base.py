from __future__ import annotations

from typing import Any, ClassVar, Mapping

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from pixel_puppy.exceptions import ValidationError


class OptionsModel(BaseModel):
    """Base for option records.

    Fields are snake_case in Python and also accept their camelCase alias, so
    ``{"baseUrl": ...}`` and ``{"base_url": ...}`` validate to the same model.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    # Message used when a field's value cannot be coerced at all.
    error_messages: ClassVar[dict[str, str]] = {}

    @classmethod
    def coerce(
        cls,
        options: "OptionsModel | Mapping[str, Any] | None" = None,
        overrides: Mapping[str, Any] | None = None,
    ):
        """Build an instance from a model, a mapping and/or keyword overrides.

        Overrides win over values in *options*. pydantic validation failures
        are re-raised as :class:`pixel_puppy.exceptions.ValidationError`.
        """

        data = cls.collect(options, overrides)
        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            raise ValidationError(cls._describe(exc)) from exc

    @classmethod
    def collect(
        cls,
        options: "OptionsModel | Mapping[str, Any] | None" = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Merge *options* and *overrides* into a dict keyed by field name, unvalidated."""

        if options is None:
            data: dict[str, Any] = {}
        elif isinstance(options, cls):
            data = options.model_dump(exclude_unset=True)
        elif isinstance(options, Mapping):
            data = {cls._field_name(key): value for key, value in options.items()}
        else:
            raise ValidationError(
                f"options must be a mapping or {cls.__name__}, got {type(options).__name__}."
            )
        if overrides:
            data.update({cls._field_name(key): value for key, value in overrides.items()})
        return data

    @classmethod
    def _field_name(cls, key: str) -> str:
        for name, info in cls.model_fields.items():
            if key == name or key == info.alias:
                return name
        return key

    @classmethod
    def _describe(cls, exc: PydanticValidationError) -> str:
        error = exc.errors()[0]
        loc = error.get("loc") or ("options",)
        field = cls._field_name(str(loc[0]))
        if field in cls.error_messages:
            return cls.error_messages[field]
        return f"Invalid {field}: {error.get('msg', 'invalid value')}."
