from typing import Dict, List, Optional

from pydantic import Field  # type: ignore

from docusign_rest.models.common import DocuSignModel, ErrorDetails, NameValue
from docusign_rest.models.decoders import DSBool
from docusign_rest.models.tabs import Tabs


class EmailNotification(DocuSignModel):
    """Per recipient email, overriding the envelope subject and blurb"""

    email_body: str = ""
    email_subject: str = ""
    supported_language: str = ""


class InformationInput(DocuSignModel):
    display_level_code: str = ""
    receive_in_response: str = ""


class AddressInformation(DocuSignModel):
    street1: str = ""
    street2: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    zip_plus4: str = ""


class AddressInformationInput(InformationInput):
    address_information: Optional[AddressInformation] = None


class DobInformationInput(InformationInput):
    date_of_birth: str = ""


class Ssn4InformationInput(InformationInput):
    ssn4: str = ""


class Ssn9InformationInput(InformationInput):
    ssn9: str = ""


class IdCheckInformationInput(DocuSignModel):
    address_information_input: Optional[AddressInformationInput] = None
    dob_information_input: Optional[DobInformationInput] = None
    ssn4_information_input: Optional[Ssn4InformationInput] = None
    ssn9_information_input: Optional[Ssn9InformationInput] = None


class PhoneAuthentication(DocuSignModel):
    recip_may_provide_number: str = ""
    validate_recip_provided_number: str = ""
    record_voice_print: str = ""
    sender_provided_numbers: List[str] = Field(default_factory=list)


class SamlAuthentication(DocuSignModel):
    saml_assertion_attributes: List[NameValue] = Field(default_factory=list)


class SmsAuthentication(DocuSignModel):
    sender_provided_numbers: List[str] = Field(default_factory=list)


class RecipientAttachment(DocuSignModel):
    label: str = ""
    attachment_type: str = ""
    data: str = ""


class Recipient(DocuSignModel):
    """Fields shared by every recipient kind"""

    name: str = ""
    access_code: str = ""
    add_access_code_to_email: DSBool = False
    client_user_id: str = ""
    embedded_recipient_start_url: str = Field(default="", alias="embeddedRecipientStartURL")
    custom_fields: List[str] = Field(default_factory=list)
    email_notification: Optional[EmailNotification] = None
    excluded_documents: List[str] = Field(default_factory=list)
    id_check_configuration_name: str = ""
    id_check_information_input: Optional[IdCheckInformationInput] = None
    inherit_email_notification_configuration: DSBool = False
    note: str = ""
    phone_authentication: Optional[PhoneAuthentication] = None
    recipient_attachment: Optional[RecipientAttachment] = None
    recipient_captive_info: str = ""
    recipient_id: str = ""
    require_id_lookup: DSBool = False
    role_name: str = ""
    routing_order: str = ""
    saml_authentication: Optional[SamlAuthentication] = None
    sms_authentication: Optional[SmsAuthentication] = None
    social_authentications: DSBool = False
    status: str = ""
    template_access_code_required: DSBool = False
    template_locked: DSBool = False
    template_required: DSBool = False
    error_details: Optional[ErrorDetails] = None


class EmailRecipient(Recipient):
    email: str = ""


class DelegatingRecipient(EmailRecipient):
    can_edit_recipient_emails: DSBool = False
    can_edit_recipient_names: DSBool = False


class Agent(DelegatingRecipient):
    """Fills in name and email for recipients later in the routing order"""


class CarbonCopy(EmailRecipient):
    """Receives a copy once the envelope reaches them and when it completes"""


class CertifiedDelivery(DelegatingRecipient):
    pass


class Editor(DelegatingRecipient):
    pass


class Intermediary(DelegatingRecipient):
    pass


class SignerFields(DocuSignModel):
    auto_navigation: str = ""
    default_recipient: str = ""
    sign_in_each_location: str = ""
    signer_email: str = ""
    signer_name: str = ""
    tabs: Optional[Tabs] = None


class InPersonSigner(Recipient, SignerFields):
    host_email: str = ""
    host_name: str = ""


class Signer(EmailRecipient, SignerFields):
    is_bulk_recipient: str = ""
    bulk_recipients_uri: str = ""
    delivery_method: str = ""
    delivered_date_time: str = ""
    signed_date_time: str = ""
    offline_attributes: Dict[str, str] = Field(default_factory=dict)


class RecipientList(DocuSignModel):
    """Recipients of an envelope, grouped by kind"""

    agents: List[Agent] = Field(default_factory=list)
    carbon_copies: List[CarbonCopy] = Field(default_factory=list)
    certified_deliveries: List[CertifiedDelivery] = Field(default_factory=list)
    editors: List[Editor] = Field(default_factory=list)
    in_person_signers: List[InPersonSigner] = Field(default_factory=list)
    intermediaries: List[Intermediary] = Field(default_factory=list)
    signers: List[Signer] = Field(default_factory=list)
    recipient_count: str = ""

    def values(self) -> List[NameValue]:
        """Tab labels and values entered by in-person signers and signers"""
        result: List[NameValue] = []
        for recipient in [*self.in_person_signers, *self.signers]:
            if recipient.tabs is not None:
                result.extend(recipient.tabs.values())
        return result


class RecipientUpdateResponse(DocuSignModel):
    recipient_id: str = ""
    error_details: Optional[ErrorDetails] = None


class RecipientUpdateResult(DocuSignModel):
    """Outcome of modifying recipients, one entry per recipient"""

    recipient_update_results: List[RecipientUpdateResponse] = Field(default_factory=list)
