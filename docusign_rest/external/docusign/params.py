"""Query options accepted by the DocuSign endpoints.

Each endpoint takes any number of ``QueryParam`` values; repeating a name
sends the option more than once. Dates are sent in the vendor query format
``MM/DD/YYYY HH:MM``.
"""

from datetime import datetime
from enum import Enum

from docusign_rest.client.docusign.call import QueryParam
from docusign_rest.models.decoders import ds_query_time_format


def _flag(name: str, value: bool = True) -> QueryParam:
    return QueryParam(name, "true" if value else "false")


class SearchFolder(str, Enum):
    """Search folders of ``envelope_search``"""

    DRAFTS = "drafts"
    AWAITING_MY_SIGNATURE = "awaiting_my_signature"
    OUT_FOR_SIGNATURE = "out_for_signature"
    COMPLETED = "completed"


# ============================================================================
# FOLDER LIST
# ============================================================================

FOLDER_TEMPLATES_INCLUDE = QueryParam("template", "include")
FOLDER_TEMPLATES_ONLY = QueryParam("template", "only")


# ============================================================================
# FOLDER ENVELOPE SEARCH
# ============================================================================

def folder_search_start_position(position: int) -> QueryParam:
    return QueryParam("start_position", str(position))


def folder_search_from_date(value: datetime) -> QueryParam:
    return QueryParam("from_date", ds_query_time_format(value))


def folder_search_to_date(value: datetime) -> QueryParam:
    return QueryParam("to_date", ds_query_time_format(value))


def folder_search_text(text: str) -> QueryParam:
    return QueryParam("search_text", text)


def folder_search_status(status: str) -> QueryParam:
    return QueryParam("status", status)


def folder_search_owner_name(name: str) -> QueryParam:
    return QueryParam("owner_name", name)


def folder_search_owner_email(email: str) -> QueryParam:
    return QueryParam("owner_email", email)


# ============================================================================
# ENVELOPE SEARCH
# ============================================================================

def envelope_search_start_position(position: int) -> QueryParam:
    return QueryParam("start_position", str(position))


def envelope_search_count(count: int) -> QueryParam:
    return QueryParam("count", str(count))


def envelope_search_from_date(value: datetime) -> QueryParam:
    return QueryParam("from_date", ds_query_time_format(value))


def envelope_search_to_date(value: datetime) -> QueryParam:
    return QueryParam("to_date", ds_query_time_format(value))


ENVELOPE_SEARCH_ORDER_BY_ACTION_REQUIRED = QueryParam("order_by", "action_required")
ENVELOPE_SEARCH_ORDER_BY_CREATED = QueryParam("order_by", "created")
ENVELOPE_SEARCH_ORDER_BY_COMPLETED = QueryParam("order_by", "completed")
ENVELOPE_SEARCH_ORDER_BY_SENT = QueryParam("order_by", "sent")
ENVELOPE_SEARCH_ORDER_BY_SIGNER_LIST = QueryParam("order_by", "signer_list")
ENVELOPE_SEARCH_ORDER_BY_STATUS = QueryParam("order_by", "status")
ENVELOPE_SEARCH_ORDER_BY_SUBJECT = QueryParam("order_by", "subject")
ENVELOPE_SEARCH_ORDER_ASC = QueryParam("order", "asc")
ENVELOPE_SEARCH_ORDER_DESC = QueryParam("order", "desc")
ENVELOPE_SEARCH_INCLUDE_RECIPIENTS = _flag("include_recipients")


# ============================================================================
# DOCUMENTS
# ============================================================================

DOCUMENT_SHOW_CHANGES = _flag("show_changes")

COMBINED_CERTIFICATE = _flag("certificate")
COMBINED_SHOW_CHANGES = _flag("show_changes")
COMBINED_WATERMARK = _flag("watermark")


def combined_certificate(include: bool) -> QueryParam:
    return _flag("certificate", include)


def combined_watermark(include: bool) -> QueryParam:
    return _flag("watermark", include)


# ============================================================================
# LOGIN INFORMATION
# ============================================================================

LOGIN_INCLUDE_API_PASSWORD = _flag("api_password")
LOGIN_INCLUDE_ACCOUNT_ID_GUID = _flag("include_account_id_guid")
LOGIN_SETTINGS_ALL = QueryParam("login_settings", "all")
LOGIN_SETTINGS_NONE = QueryParam("login_settings", "none")


# ============================================================================
# ENVELOPE STATUS CHANGES
# ============================================================================

def status_change_from_date(value: datetime) -> QueryParam:
    return QueryParam("from_date", ds_query_time_format(value))


def status_change_to_date(value: datetime) -> QueryParam:
    return QueryParam("to_date", ds_query_time_format(value))


def status_change_status(status: str) -> QueryParam:
    return QueryParam("status", status)


def status_change_from_to_status(status: str) -> QueryParam:
    return QueryParam("from_to_status", status)


def status_change_envelope(envelope_id: str) -> QueryParam:
    return QueryParam("envelopeId", envelope_id)


def status_change_custom_field(name: str, value: str) -> QueryParam:
    return QueryParam("custom_field", f"{name}={value}")


def status_change_transaction_ids(*transaction_ids: str) -> QueryParam:
    return QueryParam("transaction_ids", ",".join(transaction_ids))


# ============================================================================
# RECIPIENTS
# ============================================================================

RECIPIENTS_INCLUDE_TABS = _flag("include_tabs")
RECIPIENTS_INCLUDE_EXTENDED = _flag("include_extended")
RECIPIENTS_RESEND = _flag("resend_envelope")


# ============================================================================
# TEMPLATE SEARCH
# ============================================================================

def template_search_folder(folder: str) -> QueryParam:
    return QueryParam("folder", folder)


def template_search_folder_ids(*folder_ids: str) -> QueryParam:
    return QueryParam("folder_ids", ",".join(folder_ids))


def template_search_include(
    recipients: bool = False,
    folders: bool = False,
    documents: bool = False,
    custom_fields: bool = False,
    notifications: bool = False,
) -> QueryParam:
    """Comma separated list of the sections returned with each template"""
    flags = [
        ("recipients", recipients),
        ("folders", folders),
        ("documents", documents),
        ("custom_fields", custom_fields),
        ("notifications", notifications),
    ]
    return QueryParam("include", ",".join(name for name, wanted in flags if wanted))


def template_search_count(count: int) -> QueryParam:
    return QueryParam("count", str(count))


def template_search_start_position(position: int) -> QueryParam:
    return QueryParam("start_position", str(position))


def template_search_from_date(value: datetime) -> QueryParam:
    return QueryParam("from_date", ds_query_time_format(value))


def template_search_to_date(value: datetime) -> QueryParam:
    return QueryParam("to_date", ds_query_time_format(value))


def template_search_used_from_date(value: datetime) -> QueryParam:
    return QueryParam("used_from_date", ds_query_time_format(value))


def template_search_used_to_date(value: datetime) -> QueryParam:
    return QueryParam("used_to_date", ds_query_time_format(value))


def template_search_text(text: str) -> QueryParam:
    return QueryParam("search_text", text)


TEMPLATE_SEARCH_ORDER_ASC = QueryParam("order", "asc")
TEMPLATE_SEARCH_ORDER_DESC = QueryParam("order", "desc")
TEMPLATE_SEARCH_ORDER_BY_NAME = QueryParam("order_by", "name")
TEMPLATE_SEARCH_ORDER_BY_MODIFIED = QueryParam("order_by", "modified")
TEMPLATE_SEARCH_ORDER_BY_USED = QueryParam("order_by", "used")
TEMPLATE_SEARCH_FILTER_OWNED = QueryParam("user_filter", "owned_by_me")
TEMPLATE_SEARCH_FILTER_SHARED_WITH_ME = QueryParam("user_filter", "shared_with_me")
TEMPLATE_SEARCH_FILTER_ALL = QueryParam("user_filter", "all")
TEMPLATE_SEARCH_SHARED_BY_ME = _flag("shared_by_me")
TEMPLATE_SEARCH_NOT_SHARED_BY_ME = _flag("shared_by_me", False)
