"""
Admin Settings Page

Data side of a tabbed settings page: content structure and field
definitions come from providers, submitted values are sanitized through the
field registry and stored as one option blob per page.

Structure provider returns:
    {"general": {"title": "General", "display_mode": "cards",
                 "sections": {"main": "Main", "advanced": "Advanced"}}}

Fields provider returns field definitions grouped by tab:
    {"general": [{"id": "site_title", "type": "text", "section": "main"}]}
"""

import json
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field

from config.constants import DEFAULT_CAPABILITY, DEFAULT_DISPLAY_MODE
from orbitools.cache import NamespacedCache

from .fields import FieldRegistry
from .notices import NoticeManager
from .options import OptionStore, option_key
from .security import NonceManager, User, nonce_action

logger = logging.getLogger(__name__)

StructureProvider = Callable[[], Dict[str, Dict[str, Any]]]
FieldsProvider = Callable[[], Dict[str, List[Dict[str, Any]]]]
PreSaveFilter = Callable[[Dict[str, Any]], Dict[str, Any]]
PostSaveListener = Callable[[Dict[str, Any], bool], None]


class SaveResponse(BaseModel):
    """Result of a settings save request"""
    success: bool
    status: int = 200
    message: str = ""
    data: Dict[str, Any] = Field(default_factory=dict)


class AdminPage:
    """
    Settings page for one slug.

    Usage:
        page = AdminPage("orbitools", structure_provider, fields_provider)
        page.get_tabs()                         # {"general": "General"}
        token = page.create_nonce()
        page.handle_save_request({"adminkit_nonce": token,
                                  "settings": '{"site_title": "Hi"}'}, user)
    """

    def __init__(
        self,
        slug: str,
        structure_provider: Optional[StructureProvider] = None,
        fields_provider: Optional[FieldsProvider] = None,
        options: Optional[OptionStore] = None,
        field_registry: Optional[FieldRegistry] = None,
        nonces: Optional[NonceManager] = None,
        transients: Optional[NamespacedCache] = None,
        capability: str = DEFAULT_CAPABILITY,
    ):
        self.slug = slug
        self.structure_provider = structure_provider or dict
        self.fields_provider = fields_provider or dict
        self.options = options if options is not None else OptionStore()
        self.field_registry = field_registry or FieldRegistry()
        self.nonces = nonces or NonceManager()
        self.notices = NoticeManager(slug, transients)
        self.capability = capability

        self._pre_save: List[PreSaveFilter] = []
        self._post_save: List[PostSaveListener] = []

    @property
    def option_key(self) -> str:
        return option_key(self.slug)

    # ========== Content structure ==========

    def get_content_structure(self) -> Dict[str, Dict[str, Any]]:
        return self.structure_provider() or {}

    def get_content_fields(self) -> Dict[str, List[Dict[str, Any]]]:
        return self.fields_provider() or {}

    def get_all_fields(self) -> List[Dict[str, Any]]:
        fields: List[Dict[str, Any]] = []
        for tab_fields in self.get_content_fields().values():
            fields.extend(tab_fields)
        return fields

    def get_tabs(self) -> Dict[str, str]:
        """Tab key -> title, in structure order"""
        return {
            key: tab.get("title") or key.capitalize()
            for key, tab in self.get_content_structure().items()
        }

    def get_sections(self, tab_key: str) -> Dict[str, Any]:
        tab = self.get_content_structure().get(tab_key) or {}
        return tab.get("sections") or {}

    def get_section_display_mode(self, tab_key: str) -> str:
        tab = self.get_content_structure().get(tab_key) or {}
        return tab.get("display_mode") or DEFAULT_DISPLAY_MODE

    def get_active_tab(self, requested: Optional[str] = None) -> str:
        """Requested tab if it exists, else the first tab, else ''"""
        tabs = self.get_tabs()
        if requested and requested in tabs:
            return requested
        return next(iter(tabs), "")

    def get_active_section(self, tab_key: str, requested: Optional[str] = None) -> str:
        sections = self.get_sections(tab_key)
        if requested and requested in sections:
            return requested
        return next(iter(sections), "")

    # ========== Values ==========

    def get_settings(self) -> Dict[str, Any]:
        return self.options.get_settings(self.slug)

    def get_field_value(self, field_id: str, default: Any = "") -> Any:
        return self.get_settings().get(field_id, default)

    def on_pre_save(self, callback: PreSaveFilter) -> None:
        """Register a filter applied to sanitized data before it is stored"""
        self._pre_save.append(callback)

    def on_post_save(self, callback: PostSaveListener) -> None:
        """Register a listener called with (sanitized_data, result) after saving"""
        self._post_save.append(callback)

    def sanitize_settings_data(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Sanitize submitted settings.

        Configured fields are sanitized by their type (missing ones as '').
        Keys ending in "_enabled" are module toggles and sanitized as
        checkboxes. Any other unknown key is sanitized as text.
        """
        sanitized: Dict[str, Any] = {}

        for field in self.get_all_fields():
            field_id = field.get("id")
            if not field_id:
                continue
            value = data.get(field_id, "")
            sanitized[field_id] = self.field_registry.sanitize_field_value(field, value)

        for key, value in data.items():
            if key.endswith("_enabled"):
                sanitized[key] = self.field_registry.sanitize_field_value({"type": "checkbox"}, value)
            elif key not in sanitized:
                sanitized[key] = self.field_registry.sanitize_field_value({"type": "text"}, value)

        for callback in self._pre_save:
            sanitized = callback(sanitized)

        return sanitized

    def validate_settings_data(self, data: Mapping[str, Any]) -> Dict[str, str]:
        """Field id -> error message for every configured field that fails"""
        errors: Dict[str, str] = {}
        for field in self.get_all_fields():
            field_id = field.get("id")
            if not field_id:
                continue
            result = self.field_registry.validate_field_value(field, data.get(field_id, ""))
            if result is not True:
                errors[field_id] = str(result)
        return errors

    def save_settings(self, data: Mapping[str, Any]) -> bool:
        """Sanitize and store; storing identical data still counts as success"""
        sanitized = self.sanitize_settings_data(data)

        result = self.options.update_settings(self.slug, sanitized)
        if not result and self.options.get(self.option_key) == sanitized:
            result = True

        for callback in self._post_save:
            callback(sanitized, result)

        return result

    # ========== Requests ==========

    def create_nonce(self) -> str:
        return self.nonces.create(nonce_action(self.slug))

    @staticmethod
    def _parse_settings(raw: Any) -> Optional[Dict[str, Any]]:
        if raw is None or raw == "":
            return {}
        if isinstance(raw, Mapping):
            return dict(raw)
        if isinstance(raw, str):
            try:
                parsed = json.loads(raw)
            except json.JSONDecodeError:
                return None
            return parsed if isinstance(parsed, dict) else None
        return None

    def handle_save_request(self, request: Mapping[str, Any], user: User) -> SaveResponse:
        """Verify, parse and save a submitted settings form"""
        if not self.nonces.verify(request.get("adminkit_nonce"), nonce_action(self.slug)):
            logger.warning(f"Rejected settings save for '{self.slug}': invalid nonce")
            return SaveResponse(success=False, status=403, message="Invalid nonce")

        if not user.can(self.capability):
            logger.warning(f"Rejected settings save for '{self.slug}': user {user.user_id} lacks {self.capability}")
            return SaveResponse(success=False, status=403, message="Insufficient permissions")

        settings_data = self._parse_settings(request.get("settings"))
        if settings_data is None:
            return SaveResponse(success=False, status=400, message="Invalid settings data")

        try:
            result = self.save_settings(settings_data)
        except Exception as e:
            logger.error(f"Saving settings for '{self.slug}' failed: {e}", exc_info=True)
            return SaveResponse(success=False, status=500, message="Failed to save settings")

        if not result:
            return SaveResponse(success=False, status=500, message="Failed to save settings")

        return SaveResponse(
            success=True,
            message="Settings saved successfully",
            data={"settings": self.get_settings()},
        )
