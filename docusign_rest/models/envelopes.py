"""Envelope payloads: creation requests, status and their satellites."""

from typing import Dict, List, Optional

from pydantic import Field  # type: ignore

from docusign_rest.models.common import DocuSignModel, ErrorDetails, NameValue
from docusign_rest.models.decoders import DSBool, DSTime
from docusign_rest.models.documents import Document
from docusign_rest.models.recipients import EmailNotification, RecipientList
from docusign_rest.models.tabs import Tabs

# ============================================================
# Custom fields
# ============================================================


class CustomField(DocuSignModel):
    field_id: str = ""
    name: str = ""
    required: str = ""
    show: str = ""
    value: str = ""
    error_details: Optional[ErrorDetails] = None


class ListCustomField(CustomField):
    list_items: List[str] = Field(default_factory=list)


class CustomFieldList(DocuSignModel):
    list_custom_fields: List[ListCustomField] = Field(default_factory=list)
    text_custom_fields: List[CustomField] = Field(default_factory=list)


# ============================================================
# Notifications
# ============================================================


class Reminder(DocuSignModel):
    reminder_enabled: str = ""
    reminder_delay: str = ""  # days
    reminder_frequency: str = ""  # days between reminders


class Expiration(DocuSignModel):
    expire_enabled: str = ""
    expire_after: str = ""  # days
    expire_warn: str = ""  # days before expiration


class Notification(DocuSignModel):
    """Reminder and expiration settings of an envelope"""

    use_account_defaults: str = ""
    reminders: Optional[Reminder] = None
    expirations: Optional[Expiration] = None


class EnvelopeEvent(DocuSignModel):
    envelope_event_status_code: str = ""
    include_documents: str = ""


class RecipientEvent(DocuSignModel):
    recipient_event_status_code: str = ""
    include_documents: str = ""


class EventNotification(DocuSignModel):
    """Connect webhook configuration attached to one envelope"""

    url: str = ""
    logging_enabled: str = ""
    require_acknowledgment: str = ""
    use_soap_interface: str = ""
    soap_name_space: str = ""
    include_certificate_with_soap: str = ""
    sign_message_with_x509_cert: str = ""
    include_documents: str = ""
    include_envelope_void_reason: str = ""
    include_time_zone: str = ""
    include_sender_account_as_custom_field: str = ""
    include_document_fields: str = ""
    include_certificate_of_completion: str = ""
    envelope_events: List[EnvelopeEvent] = Field(default_factory=list)
    recipient_events: List[RecipientEvent] = Field(default_factory=list)


class EmailSettings(DocuSignModel):
    reply_email_address_override: str = ""
    reply_email_name_override: str = ""
    bcc_email_addresses: str = ""


# ============================================================
# Templates used while creating an envelope
# ============================================================


class TemplateRole(DocuSignModel):
    email: str = ""
    name: str = ""
    role_name: str = ""
    client_user_id: str = ""
    default_recipient: str = ""
    routing_order: str = ""
    access_code: str = ""
    in_person_signer_name: str = ""
    email_notification: Optional[EmailNotification] = None
    tabs: Optional[Tabs] = None


class ServerTemplate(DocuSignModel):
    sequence: str = ""
    template_id: str = ""


class InlineTemplate(DocuSignModel):
    sequence: str = ""
    documents: List[Document] = Field(default_factory=list)
    recipients: Optional[RecipientList] = None


class CompositeTemplate(DocuSignModel):
    composite_template_id: str = ""
    server_templates: List[ServerTemplate] = Field(default_factory=list)
    inline_templates: List[InlineTemplate] = Field(default_factory=list)
    pdf_meta_data_template_sequence: str = ""
    document: Optional[Document] = None


# ============================================================
# Envelope
# ============================================================


class EnvelopeSettings(DocuSignModel):
    """Settings shared by envelopes and templates"""

    accessibility: str = ""
    allow_markup: str = ""
    allow_reassign: str = ""
    allow_recipient_recursion: str = ""
    asynchronous: str = ""
    authoritative_copy: str = ""
    auto_navigation: str = ""
    brand_id: str = ""
    email_blurb: str = ""
    email_subject: str = ""
    enable_wet_sign: str = ""
    enforce_signer_visibility: str = ""
    envelope_id_stamping: str = ""
    message_lock: str = ""
    notification: Optional[Notification] = None
    recipients_lock: str = ""
    signing_location: str = ""
    custom_fields: Optional[CustomFieldList] = None
    documents: List[Document] = Field(default_factory=list)
    recipients: Optional[RecipientList] = None
    event_notification: Optional[EventNotification] = None


class Envelope(EnvelopeSettings):
    """An envelope definition.

    ``status`` decides what creation does: ``"sent"`` sends the envelope,
    ``"created"`` saves it as a draft.
    """

    status: str = ""
    transaction_id: str = ""
    use_disclosure: DSBool = False
    email_settings: Optional[EmailSettings] = None
    template_id: str = ""
    template_roles: List[TemplateRole] = Field(default_factory=list)
    composite_templates: List[CompositeTemplate] = Field(default_factory=list)


class EnvelopeSummary(DocuSignModel):
    """Answer to an envelope creation"""

    envelope_id: str = ""
    status: str = ""
    status_date_time: DSTime = None
    uri: str = ""


class EnvelopeUris(DocuSignModel):
    """Status of one envelope and the URIs of its sub resources"""

    allow_reassign: str = ""
    certificate_uri: str = ""
    created_date_time: DSTime = None
    custom_fields_uri: str = ""
    documents_combined_uri: str = ""
    documents_uri: str = ""
    email_blurb: str = ""
    email_subject: str = ""
    enable_wet_sign: str = ""
    envelope_id: str = ""
    envelope_uri: str = ""
    last_modified_date_time: DSTime = None
    notification_uri: str = ""
    purge_state: str = ""
    recipients_uri: str = ""
    status: str = ""
    status_changed_date_time: DSTime = None
    templates_uri: str = ""


class EnvelopeList(DocuSignModel):
    envelopes: List[EnvelopeUris] = Field(default_factory=list)
    result_set_size: str = ""


class EnvelopeIdList(DocuSignModel):
    """Body of the requests naming several envelopes"""

    envelope_ids: List[str] = Field(default_factory=list)


class AuditEvent(DocuSignModel):
    event_fields: List[NameValue] = Field(default_factory=list)

    def as_dict(self) -> Dict[str, str]:
        """Event fields keyed by name"""
        return {field.name: field.value for field in self.event_fields}


class AuditEventList(DocuSignModel):
    audit_events: List[AuditEvent] = Field(default_factory=list)
