"""
Field Types

Each field type knows how to sanitize and validate a submitted value for
one field definition. Field definitions are plain mappings:

    {"id": "site_title", "name": "Site title", "type": "text",
     "required": True, "max_length": 60, "std": ""}

validate() returns True or a human-readable error message.
"""

import logging
import math
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from .registry import Registry
from .sanitize import (
    esc_url_raw,
    kses_post,
    sanitize_email,
    sanitize_text_field,
    sanitize_textarea_field,
)

logger = logging.getLogger(__name__)

ValidationResult = Union[bool, str]


def _is_numeric(value: Any) -> bool:
    """Finite int, float or numeric string; inf and nan are rejected"""
    if isinstance(value, bool):
        return False
    try:
        number = float(value) if isinstance(value, (int, float)) else float(str(value).strip())
    except (ValueError, OverflowError):
        return False
    return math.isfinite(number)


class FieldType:
    """Base field type: plain-text sanitization, no validation rules"""

    type_name = "base"

    def __init__(self, field: Mapping[str, Any]):
        self.field = dict(field)

    @property
    def field_id(self) -> str:
        return self.field.get("id", "")

    @property
    def label(self) -> str:
        return self.field.get("name", "") or self.field_id

    @property
    def options(self) -> Optional[Dict[str, Any]]:
        options = self.field.get("options")
        return options if isinstance(options, dict) else None

    @property
    def required(self) -> bool:
        return bool(self.field.get("required", False))

    @property
    def default(self) -> Any:
        return self.field.get("std", "")

    def sanitize(self, value: Any) -> Any:
        return sanitize_text_field(value)

    def validate(self, value: Any) -> ValidationResult:
        return True


class _LengthRules:
    """Shared required/min_length/max_length checks for text-like fields"""

    def _check_length(self: FieldType, value: str) -> ValidationResult:
        min_length = self.field.get("min_length")
        if min_length is not None and len(value) < min_length:
            return f"The {self.label} field must be at least {min_length} characters long."

        max_length = self.field.get("max_length")
        if max_length is not None and len(value) > max_length:
            return f"The {self.label} field must be no more than {max_length} characters long."

        return True


class TextField(_LengthRules, FieldType):
    type_name = "text"

    def validate(self, value: Any) -> ValidationResult:
        text = "" if value is None else str(value)
        if self.required and not text:
            return f"The {self.label} field is required."
        return self._check_length(text)


class TextareaField(_LengthRules, FieldType):
    type_name = "textarea"

    def sanitize(self, value: Any) -> str:
        if self.field.get("allow_html"):
            return kses_post(value)
        return sanitize_textarea_field(value)

    def validate(self, value: Any) -> ValidationResult:
        text = "" if value is None else str(value)
        if self.required and not text.strip():
            return f"The {self.label} field is required."
        return self._check_length(text)


class EmailField(FieldType):
    type_name = "email"

    def sanitize(self, value: Any) -> str:
        return sanitize_email(value)

    def validate(self, value: Any) -> ValidationResult:
        if not value:
            return f"The {self.label} field is required." if self.required else True
        if not sanitize_email(value):
            return f"The {self.label} field must be a valid email address."
        return True


class UrlField(FieldType):
    type_name = "url"

    def sanitize(self, value: Any) -> str:
        return esc_url_raw(value)

    def validate(self, value: Any) -> ValidationResult:
        if not value:
            return f"The {self.label} field is required." if self.required else True
        if not esc_url_raw(value):
            return f"The {self.label} field must be a valid URL."
        return True


class NumberField(FieldType):
    type_name = "number"

    def _is_decimal(self) -> bool:
        step = self.field.get("step", 1)
        return str(step) != "1" and "." in str(step)

    def sanitize(self, value: Any) -> Union[int, float]:
        if not _is_numeric(value):
            return 0
        number = float(str(value).strip()) if not isinstance(value, (int, float)) else value
        if self._is_decimal():
            return float(number)
        return int(number)

    def validate(self, value: Any) -> ValidationResult:
        if value is None or value == "":
            return f"The {self.label} field is required." if self.required else True

        if not _is_numeric(value):
            return f"The {self.label} field must be a number."

        number = float(value)
        minimum = self.field.get("min")
        if minimum is not None and number < minimum:
            return f"The {self.label} field must be at least {minimum}."

        maximum = self.field.get("max")
        if maximum is not None and number > maximum:
            return f"The {self.label} field must be no more than {maximum}."

        return True


class _MultiChoice:
    """Validation for fields that accept a list of option keys"""

    def _sanitize_choices(self: FieldType, value: Any) -> List[str]:
        if not isinstance(value, (list, tuple)):
            return []
        valid = {str(k) for k in self.options or {}}
        cleaned = (sanitize_text_field(item) for item in value)
        return [item for item in cleaned if item in valid]

    def _validate_choices(self: FieldType, value: Any) -> ValidationResult:
        selected = list(value) if isinstance(value, (list, tuple)) else []

        if self.required and not selected:
            return f"At least one option must be selected for {self.label}."

        min_selections = self.field.get("min_selections")
        if min_selections is not None and len(selected) < min_selections:
            return f"At least {min_selections} option(s) must be selected for {self.label}."

        max_selections = self.field.get("max_selections")
        if max_selections is not None and len(selected) > max_selections:
            return f"No more than {max_selections} option(s) can be selected for {self.label}."

        valid = {str(k) for k in self.options or {}}
        if any(str(item) not in valid for item in selected):
            return f"Invalid option selected for {self.label} field."

        return True


class CheckboxField(_MultiChoice, FieldType):
    """Single checkbox ('1' or '') or, with options, a multi-checkbox"""

    type_name = "checkbox"

    def sanitize(self, value: Any) -> Union[str, List[str]]:
        if self.options is not None:
            return self._sanitize_choices(value)
        return "1" if value and value != "0" else ""

    def validate(self, value: Any) -> ValidationResult:
        if self.options is not None:
            return self._validate_choices(value)
        if self.required and not value:
            return f"The {self.label} field must be checked."
        return True


class RadioField(FieldType):
    type_name = "radio"

    def sanitize(self, value: Any) -> str:
        if self.options is not None:
            text = sanitize_text_field(value)
            return text if text in {str(k) for k in self.options} else ""
        return "1" if value else ""

    def validate(self, value: Any) -> ValidationResult:
        if self.options is not None:
            if self.required and not value:
                return f"An option must be selected for {self.label}."
            if value and str(value) not in {str(k) for k in self.options}:
                return f"Invalid option selected for {self.label} field."
            return True
        if self.required and not value:
            return f"The {self.label} field must be selected."
        return True


class SelectField(_MultiChoice, FieldType):
    type_name = "select"

    @property
    def multiple(self) -> bool:
        return bool(self.field.get("multiple", False))

    def sanitize(self, value: Any) -> Union[str, List[str]]:
        if self.multiple:
            return self._sanitize_choices(value)
        text = sanitize_text_field(value)
        if self.options is not None:
            return text if text in {str(k) for k in self.options} else ""
        return text

    def validate(self, value: Any) -> ValidationResult:
        if self.multiple:
            return self._validate_choices(value)
        if self.required and not value:
            return f"The {self.label} field is required."
        if value and self.options is not None and str(value) not in {str(k) for k in self.options}:
            return f"Invalid value selected for {self.label} field."
        return True


class HtmlField(FieldType):
    """Display-only content; never stores a value"""

    type_name = "html"

    def sanitize(self, value: Any) -> str:
        return ""


CORE_FIELD_TYPES: List[Type[FieldType]] = [
    TextField,
    TextareaField,
    EmailField,
    UrlField,
    NumberField,
    CheckboxField,
    RadioField,
    SelectField,
    HtmlField,
]


class FieldRegistry(Registry[Type[FieldType]]):
    """Field type registry, pre-loaded with the core types"""

    def __init__(self, register_core: bool = True):
        super().__init__("field type")
        if register_core:
            for field_class in CORE_FIELD_TYPES:
                self.register(field_class.type_name, field_class)

    def create_field(self, field: Mapping[str, Any]) -> Optional[FieldType]:
        """Field instance for a definition, None for a missing or unknown type"""
        field_type = field.get("type")
        if not field_type or not self.is_registered(field_type):
            return None
        return self.resolve(field_type)(field)

    def sanitize_field_value(self, field: Mapping[str, Any], value: Any) -> Any:
        instance = self.create_field(field)
        if instance is None:
            logger.debug(f"Unknown field type {field.get('type')!r}, sanitizing as text")
            return sanitize_text_field(value)
        return instance.sanitize(value)

    def validate_field_value(self, field: Mapping[str, Any], value: Any) -> ValidationResult:
        instance = self.create_field(field)
        if instance is None:
            return True
        return instance.validate(value)
