"""
Active-record style models backed by a remote JSON resource.

A record type declares its attributes as a pydantic schema and its remote
shape as a RecordConfig:

    class UserAttributes(RecordAttributes):
        name: str = Field(min_length=1)
        email: str

    class User(ApiRecord):
        config = RecordConfig(schema=UserAttributes, root_key=True)

Every write goes through one core operation returning a Result; the soft
variants (save, update, destroy) turn it into a bool, the hard variants
(save_or_raise, ...) into the record or a raised error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    Any,
    ClassVar,
    Dict,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from pydantic import BaseModel, ConfigDict, ValidationError

from .client import ApiClient, ClientConfig
from .collection import IndexCollection
from .config import client_config_from_env
from .error_list import BASE, ErrorList
from .errors import ApiError, ApiParseError, UnknownAttributeError
from .intents import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    RequestIntent,
    build_payload,
    create_intent,
    destroy_intent,
    find_intent,
    list_intent,
    update_intent,
)
from .messages import DEFAULT_CATALOG, MessageCatalog
from .naming import resource_path_for, root_key_for
from .outcome import Outcome, Result, error_for, raise_for_result
from .reconcile import collect_errors, normalize_keys, reconcile
from .response import ApiResponse

R = TypeVar("R", bound="ApiRecord")

# Instance state kept outside the attribute store.
RESERVED_ATTRIBUTES = frozenset({"errors", "response", "config", "attributes"})


class RecordAttributes(BaseModel):
    """Base schema for record attributes; every record carries an id."""

    id: Optional[int] = None

    model_config = ConfigDict(extra="ignore")


@dataclass(frozen=True)
class RecordConfig:
    schema: Type[BaseModel] = RecordAttributes
    resource_path: Optional[str] = None
    # None: flat payload, True: key derived from the type name, str: that key
    root_key: Union[None, bool, str] = None
    id_field: str = "id"
    exclude_none: bool = False
    client: Optional[ClientConfig] = None
    messages: MessageCatalog = field(default=DEFAULT_CATALOG)


class ApiRecord:
    config: ClassVar[RecordConfig] = RecordConfig()

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        clashes = sorted(set(cls.attribute_names()) & _reserved_names())
        if clashes:
            raise TypeError(
                f"{cls.__name__} schema declares reserved attribute name(s): "
                + ", ".join(clashes)
            )

    def __init__(self, **attributes: Any):
        self._attributes: Dict[str, Any] = self._default_attributes()
        self.errors = ErrorList()
        self.response: Optional[ApiResponse] = None
        self._destroyed = False
        self.assign_attributes(attributes)

    # --- Type-level configuration ---

    @classmethod
    def attribute_names(cls) -> Tuple[str, ...]:
        return tuple(cls.config.schema.model_fields)

    @classmethod
    def resource_path(cls) -> str:
        return cls.config.resource_path or resource_path_for(cls.__name__)

    @classmethod
    def root_key(cls) -> Optional[str]:
        root_key = cls.config.root_key
        if root_key is True:
            return root_key_for(cls.__name__)
        return root_key or None

    @classmethod
    def client(cls) -> ApiClient:
        config = cls.config.client or client_config_from_env()
        return ApiClient.from_config(config)

    @classmethod
    def request_params(cls, attributes: Mapping[str, Any]) -> Dict[str, Any]:
        """Write payload for create/update; override for custom shapes."""
        return build_payload(
            attributes,
            id_field=cls.config.id_field,
            root_key=cls.root_key(),
            exclude_none=cls.config.exclude_none,
        )

    @classmethod
    def _default_attributes(cls) -> Dict[str, Any]:
        defaults: Dict[str, Any] = {}
        for name, info in cls.config.schema.model_fields.items():
            if info.is_required():
                defaults[name] = None
            else:
                defaults[name] = info.get_default(call_default_factory=True)
        return defaults

    @classmethod
    def _send(cls, intent: RequestIntent) -> ApiResponse:
        with cls.client() as client:
            return client.request(
                intent.method,
                intent.path,
                params=intent.params,
                json=intent.json,
                resource=cls.__name__,
            )

    @classmethod
    def _from_body(cls: Type[R], body: Mapping[str, Any]) -> R:
        record = cls()
        record.merge_attributes(normalize_keys(body))
        return record

    # --- Attribute store ---

    def __getattr__(self, name: str) -> Any:
        attributes = self.__dict__.get("_attributes")
        if attributes is not None and name in attributes:
            return attributes[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        if name in type(self).attribute_names():
            self._attributes[name] = value
        else:
            super().__setattr__(name, value)

    @property
    def attributes(self) -> Dict[str, Any]:
        return dict(self._attributes)

    @property
    def id(self) -> Any:
        return self._attributes.get(self.config.id_field)

    def assign_attributes(self, attributes: Mapping[str, Any]) -> None:
        names = type(self).attribute_names()
        for key, value in attributes.items():
            if key not in names:
                raise UnknownAttributeError(type(self).__name__, key)
            self._attributes[key] = value

    def merge_attributes(self, attributes: Mapping[str, Any]) -> Dict[str, Any]:
        """Overwrite declared attributes from a server body; undeclared keys are ignored."""
        names = type(self).attribute_names()
        applied = {k: v for k, v in attributes.items() if k in names}
        self._attributes.update(applied)
        return applied

    # --- State ---

    @property
    def is_new_record(self) -> bool:
        return self.id is None

    @property
    def is_persisted(self) -> bool:
        return not self.is_new_record and not self._destroyed

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    @property
    def has_errors(self) -> bool:
        return self.errors.any()

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}: {v!r}" for k, v in self._attributes.items())
        status = self.response.status_code if self.response is not None else None
        return f"#<{type(self).__name__} {attrs}, response: {status!r}>"

    # --- Validation gate ---

    def validate(self) -> Tuple[bool, ErrorList]:
        self.errors.clear()
        try:
            model = self.config.schema.model_validate(self._attributes)
        except ValidationError as exc:
            for err in exc.errors():
                loc = err.get("loc") or ()
                field_name = str(loc[0]) if loc else BASE
                self.errors.add(field_name, err.get("msg", "is invalid"))
            return False, self.errors
        self._attributes.update(model.model_dump())
        return True, self.errors

    def _wire_attributes(self) -> Dict[str, Any]:
        # JSON-safe copy for request bodies; the store keeps typed values.
        model = self.config.schema.model_validate(self._attributes)
        return model.model_dump(mode="json")

    def is_valid(self) -> bool:
        valid, _ = self.validate()
        return valid

    def validate_or_raise(self: R) -> R:
        valid, _ = self.validate()
        if not valid:
            raise error_for(Result(Outcome.INVALID), self)
        return self

    # --- Type-level reads ---

    @classmethod
    def find(cls: Type[R], record_id: Any) -> R:
        response = cls._send(find_intent(cls.resource_path(), record_id))
        raise_for_result(Result.from_response(response))
        if not isinstance(response.body, Mapping):
            raise ApiParseError(
                response,
                f"Expected a JSON object from GET {response.url}, "
                f"got {type(response.body).__name__}",
            )
        record = cls._from_body(response.body)
        record.response = response
        return record

    @classmethod
    def index(
        cls: Type[R], *, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT
    ) -> IndexCollection[R]:
        response = cls._send(list_intent(cls.resource_path(), page=page, limit=limit))
        raise_for_result(Result.from_response(response))
        body = response.body if response.body is not None else []
        if not isinstance(body, list):
            raise ApiParseError(
                response,
                f"Expected a JSON array from GET {response.url}, "
                f"got {type(body).__name__}",
            )
        for position, item in enumerate(body):
            if not isinstance(item, Mapping):
                raise ApiParseError(
                    response,
                    f"Expected JSON objects in the array from GET {response.url}, "
                    f"got {type(item).__name__} at index {position}",
                )
        items = [cls._from_body(item) for item in body]
        return IndexCollection(items, response, page=page, limit=limit)

    all = index

    # --- Type-level writes ---

    @classmethod
    def create(cls: Type[R], **attributes: Any) -> R:
        record = cls(**attributes)
        record.save()
        return record

    @classmethod
    def create_or_raise(cls: Type[R], **attributes: Any) -> R:
        record = cls(**attributes)
        return record.save_or_raise()

    # --- Lifecycle core ---

    def _request(self, intent: RequestIntent) -> Result:
        try:
            self.response = type(self)._send(intent)
        except ApiError as exc:
            self.response = None
            return Result.from_transport_error(exc)
        result = Result.from_response(self.response)
        if result.outcome is Outcome.UNPROCESSABLE:
            collect_errors(self, self.response)
        return result

    def _save(self) -> Result:
        valid, _ = self.validate()
        if not valid:
            return Result(Outcome.INVALID)

        cls = type(self)
        payload = cls.request_params(self._wire_attributes())
        if self.is_new_record:
            intent = create_intent(cls.resource_path(), payload)
        else:
            intent = update_intent(cls.resource_path(), self.id, payload)

        result = self._request(intent)
        if result.ok:
            reconcile(self, result.response.body)
        return result

    def _destroy(self) -> Result:
        self.errors.clear()
        cls = type(self)
        result = self._request(destroy_intent(cls.resource_path(), self.id))
        if result.ok:
            reconcile(self, result.response.body)
            self._destroyed = True
        return result

    # --- Soft / hard variants ---

    def save(self) -> bool:
        return self._save().ok

    def save_or_raise(self: R) -> R:
        raise_for_result(self._save(), self)
        return self

    def update(self, **attributes: Any) -> bool:
        self.assign_attributes(attributes)
        return self.save()

    def update_or_raise(self: R, **attributes: Any) -> R:
        self.assign_attributes(attributes)
        return self.save_or_raise()

    def destroy(self) -> bool:
        return self._destroy().ok

    def destroy_or_raise(self: R) -> R:
        raise_for_result(self._destroy(), self)
        return self


def _reserved_names() -> frozenset:
    public = {name for name in dir(ApiRecord) if not name.startswith("_")}
    return RESERVED_ATTRIBUTES | (public - {"id"})


__all__ = ["ApiRecord", "RecordAttributes", "RecordConfig", "RESERVED_ATTRIBUTES"]
