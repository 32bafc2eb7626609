"""
Admin Settings Framework

Exports:
- Registry, RegistryError (explicit provider registration)
- FieldType, FieldRegistry and the core field types
- OptionStore, NoticeManager, NonceManager, User
- AdminPage, SaveResponse
"""

from .registry import Registry, RegistryError
from .fields import (
    CORE_FIELD_TYPES,
    CheckboxField,
    EmailField,
    FieldRegistry,
    FieldType,
    HtmlField,
    NumberField,
    RadioField,
    SelectField,
    TextareaField,
    TextField,
    UrlField,
)
from .options import OptionStore, option_key
from .notices import Notice, NoticeManager
from .security import NonceManager, User, nonce_action
from .page import AdminPage, SaveResponse

__all__ = [
    'Registry',
    'RegistryError',
    'CORE_FIELD_TYPES',
    'FieldType',
    'FieldRegistry',
    'TextField',
    'TextareaField',
    'EmailField',
    'UrlField',
    'NumberField',
    'CheckboxField',
    'RadioField',
    'SelectField',
    'HtmlField',
    'OptionStore',
    'option_key',
    'Notice',
    'NoticeManager',
    'NonceManager',
    'User',
    'nonce_action',
    'AdminPage',
    'SaveResponse',
]
