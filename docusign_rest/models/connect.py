"""Connect notifications.

DocuSign Connect posts envelope status changes as XML
(``DocuSignEnvelopeInformation``). ``ConnectData.from_xml`` turns such a
message into the models below. Element names are matched without their
namespace.
"""

import base64
import re
from typing import Dict, Iterator, List, Optional
from xml.etree import ElementTree as ET

from pydantic import Field  # type: ignore

from docusign_rest.models.common import DocuSignModel
from docusign_rest.models.decoders import DSBool, DSTime

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _snake(tag: str) -> str:
    """EnvelopePDFHash -> envelope_pdf_hash"""
    return _WORD_BOUNDARY.sub("_", _local_name(tag)).lower()


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _descendants(element: ET.Element, path: str) -> Iterator[ET.Element]:
    """Yield the elements at a '/' separated path of local names"""
    head, _, rest = path.partition("/")
    for child in element:
        if _local_name(child.tag) != head:
            continue
        if rest:
            yield from _descendants(child, rest)
        else:
            yield child


def _leaves(element: ET.Element) -> Dict[str, str]:
    return {_snake(child.tag): (child.text or "").strip() for child in element if len(child) == 0}


class CustomFieldStatus(DocuSignModel):
    name: str = ""
    value: str = ""
    show: DSBool = False
    required: DSBool = False


class TabStatus(DocuSignModel):
    tab_type: str = ""
    status: str = ""
    x_position: str = ""
    y_position: str = ""
    tab_label: str = ""
    tab_name: str = ""
    tab_value: str = ""
    document_id: str = ""
    page_number: str = ""
    original_value: str = ""
    validation_pattern: str = ""
    list_values: str = ""
    list_selected_value: str = ""
    custom_tab_type: str = ""


class FormField(DocuSignModel):
    name: str = ""
    value: str = ""


class RecipientAttachmentStatus(DocuSignModel):
    data: str = ""
    label: str = ""


class RecipientStatus(DocuSignModel):
    type: str = ""
    email: str = ""
    user_name: str = ""
    routing_order: str = ""
    sent: DSTime = None
    delivered: DSTime = None
    signed: DSTime = None
    decline_reason: str = ""
    status: str = ""
    recipient_ip_address: str = ""
    custom_fields: List[CustomFieldStatus] = Field(default_factory=list)
    account_status: str = ""
    recipient_id: str = ""
    tab_statuses: List[TabStatus] = Field(default_factory=list)
    form_data: List[FormField] = Field(default_factory=list)
    recipient_attachment: Optional[RecipientAttachmentStatus] = None


class DocumentStatus(DocuSignModel):
    id: str = ""
    name: str = ""
    template_name: str = ""
    sequence: str = ""


class DocumentPdf(DocuSignModel):
    name: str = ""
    pdf_bytes: str = ""

    def content(self) -> bytes:
        """Decoded PDF bytes"""
        return base64.b64decode(self.pdf_bytes)


class EnvelopeStatus(DocuSignModel):
    time_generated: DSTime = None
    envelope_id: str = ""
    subject: str = ""
    user_name: str = ""
    email: str = ""
    status: str = ""
    created: DSTime = None
    sent: DSTime = None
    delivered: DSTime = None
    signed: DSTime = None
    completed: DSTime = None
    ac_status: str = ""
    ac_status_date: str = ""
    ac_holder: str = ""
    ac_holder_email: str = ""
    ac_holder_location: str = ""
    signing_location: str = ""
    sender_ip_address: str = ""
    envelope_pdf_hash: str = ""
    auto_navigation: DSBool = False
    envelope_id_stamping: DSBool = False
    authoritative_copy: DSBool = False
    recipient_statuses: List[RecipientStatus] = Field(default_factory=list)
    custom_fields: List[CustomFieldStatus] = Field(default_factory=list)
    document_statuses: List[DocumentStatus] = Field(default_factory=list)


class ConnectData(DocuSignModel):
    """A Connect status message"""

    envelope_status: EnvelopeStatus = Field(default_factory=EnvelopeStatus)
    document_pdfs: List[DocumentPdf] = Field(default_factory=list)

    @classmethod
    def from_xml(cls, data: bytes) -> "ConnectData":
        """Parse a DocuSignEnvelopeInformation message.

        Args:
            data: The raw XML body posted by Connect
        Returns:
            The decoded message
        Raises:
            xml.etree.ElementTree.ParseError: when the body is not XML
            ValueError: when the message has no EnvelopeStatus element
        """
        root = ET.fromstring(data)
        status = _child(root, "EnvelopeStatus")
        if status is None:
            raise ValueError("Connect message has no EnvelopeStatus element")

        return cls(
            envelope_status=_envelope_status(status),
            document_pdfs=[
                DocumentPdf.model_validate(_leaves(pdf))
                for pdf in _descendants(root, "DocumentPDFs/DocumentPDF")
            ],
        )


def _custom_fields(element: ET.Element) -> List[CustomFieldStatus]:
    return [
        CustomFieldStatus.model_validate(_leaves(field))
        for field in _descendants(element, "CustomFields/CustomField")
    ]


def _recipient_status(element: ET.Element) -> RecipientStatus:
    fields: Dict[str, object] = dict(_leaves(element))
    fields["custom_fields"] = _custom_fields(element)
    fields["tab_statuses"] = [
        TabStatus.model_validate(_leaves(tab))
        for tab in _descendants(element, "TabStatuses/TabStatus")
    ]
    fields["form_data"] = [
        FormField(name=field.get("name", ""), value=_leaves(field).get("value", ""))
        for field in _descendants(element, "FormData/xfdf/fields/field")
    ]
    attachment = next(_descendants(element, "RecipientAttachment/Attachment"), None)
    fields["recipient_attachment"] = (
        RecipientAttachmentStatus.model_validate(_leaves(attachment)) if attachment is not None else None
    )
    return RecipientStatus.model_validate(fields)


def _envelope_status(element: ET.Element) -> EnvelopeStatus:
    fields: Dict[str, object] = dict(_leaves(element))
    fields["recipient_statuses"] = [
        _recipient_status(recipient)
        for recipient in _descendants(element, "RecipientStatuses/RecipientStatus")
    ]
    fields["custom_fields"] = _custom_fields(element)
    fields["document_statuses"] = [
        DocumentStatus.model_validate(_leaves(document))
        for document in _descendants(element, "DocumentStatuses/DocumentStatus")
    ]
    return EnvelopeStatus.model_validate(fields)
