from __future__ import annotations

from typing import Any, ClassVar, Dict, FrozenSet, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, ValidationError, model_serializer, model_validator

from tappay.errors import MarshalError, ResponseDecodeError


@runtime_checkable
class Marshaler(Protocol):
    """Anything that can turn itself into a JSON-ready mapping."""

    def marshal_map(self) -> Dict[str, Any]:
        ...


class TapPayParams(BaseModel):
    """
    Base for request parameters.

    Fields left as None are absent and never reach the wire. Fields the
    API always expects default to their zero value and are always sent.
    """

    def marshal_map(self) -> Dict[str, Any]:
        try:
            return self.model_dump(mode="json", exclude_none=True)
        except (ValueError, TypeError) as exc:
            raise MarshalError(f"cannot marshal {type(self).__name__}: {exc}") from exc


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, list)) and not value:
        return True
    return isinstance(value, int) and not isinstance(value, bool) and value == 0


class OmitEmptyParams(TapPayParams):
    """
    Request block whose empty values (None, "", [], 0, False) are left out.

    Nested blocks that are present stay on the wire even when all of their
    own fields were dropped. Fields named in keep_zero_fields are only
    dropped when None.
    """

    keep_zero_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        return {
            k: v
            for k, v in data.items()
            if v is not None and (k in self.keep_zero_fields or not _is_empty(v))
        }


class TapPayModel(BaseModel):
    """
    Base for decoded response bodies and their nested objects.

    Missing keys and JSON nulls fall back to the field's zero value, unknown
    keys are ignored, and numbers sent where text is expected become strings.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class TapPayResponse(TapPayModel):
    # 0 means success; anything else is a TapPay status code.
    status: int = 0
    msg: str = ""

    @classmethod
    def from_raw(cls, raw: bytes):
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise ResponseDecodeError(f"cannot unmarshal {cls.__name__}: {exc}", raw=raw) from exc
