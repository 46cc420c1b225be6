"""Domain enumerations for the records search engine.

Enums represent fixed sets of domain values (entity kinds, record
statuses, sort keys). Declaration order is significant: the filter
catalog exposes values in this order.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings, in declaration order."""
        return [member.value for member in cls]


class EntityKind(_ValuesMixin, str, Enum):
    """Kind of record a search result points at."""

    PROJECT = "project"
    CONTACT = "contact"
    COMPANY = "company"
    DOCUMENT = "document"


class SearchEntityType(_ValuesMixin, str, Enum):
    """Entity selector accepted in search filters (plural, plus 'all')."""

    PROJECTS = "projects"
    CONTACTS = "contacts"
    COMPANIES = "companies"
    DOCUMENTS = "documents"
    ALL = "all"

    @property
    def kind(self) -> EntityKind | None:
        """Return the entity kind this selector targets (None for 'all')."""
        return _SELECTOR_KINDS.get(self)


_SELECTOR_KINDS: dict[SearchEntityType, EntityKind] = {
    SearchEntityType.PROJECTS: EntityKind.PROJECT,
    SearchEntityType.CONTACTS: EntityKind.CONTACT,
    SearchEntityType.COMPANIES: EntityKind.COMPANY,
    SearchEntityType.DOCUMENTS: EntityKind.DOCUMENT,
}


class ProjectStatus(_ValuesMixin, str, Enum):
    """Project lifecycle status."""

    PLANNING = "planning"
    ACTIVE = "active"
    ON_HOLD = "on_hold"
    COMPLETED = "completed"


class ProjectStage(_ValuesMixin, str, Enum):
    """Project delivery stage."""

    DESIGN = "design"
    CONSTRUCTION = "construction"
    HAND_OFF = "hand_off"


class CompanyType(_ValuesMixin, str, Enum):
    """Company classification."""

    DEVELOPER = "developer"
    CONTRACTOR = "contractor"
    ARCHITECT_CONSULTANT = "architect_consultant"
    SUPPLIER_VENDOR = "supplier_vendor"


class ContactRole(_ValuesMixin, str, Enum):
    """Role a contact plays for their company."""

    PRIMARY_CONTACT = "primary_contact"
    PROJECT_MANAGER = "project_manager"
    TECHNICAL_LEAD = "technical_lead"
    FINANCE_CONTACT = "finance_contact"
    SALES_CONTACT = "sales_contact"
    SUPPORT_CONTACT = "support_contact"
    EXECUTIVE = "executive"
    OTHER = "other"


class DocumentType(_ValuesMixin, str, Enum):
    """Project document category."""

    DRAWINGS_PLANS = "drawings_plans"
    CONTRACTS = "contracts"
    PERMITS = "permits"
    REPORTS = "reports"
    SPECIFICATIONS = "specifications"
    CORRESPONDENCE = "correspondence"
    PHOTOS = "photos"
    OTHER = "other"


class SortBy(_ValuesMixin, str, Enum):
    """Ordering key for merged search results."""

    RELEVANCE = "relevance"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    NAME = "name"
    TITLE = "title"


class SortOrder(_ValuesMixin, str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class UserRole(_ValuesMixin, str, Enum):
    """Application user role (from the auth/session layer)."""

    ADMIN = "admin"
    STAFF = "staff"
    READONLY = "readonly"
