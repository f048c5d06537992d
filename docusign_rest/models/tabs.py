"""Tabs: positioned form fields placed on a document for a recipient."""

from typing import List, Optional

from pydantic import Field  # type: ignore

from docusign_rest.models.common import DocuSignModel, ErrorDetails, NameValue
from docusign_rest.models.decoders import DSBool

# ============================================================
# Shared tab fields
# ============================================================


class BaseTab(DocuSignModel):
    document_id: str = ""
    tab_label: str = ""
    error_details: Optional[ErrorDetails] = None


class PositionedTab(DocuSignModel):
    anchor_ignore_if_not_present: str = ""
    anchor_string: str = ""
    anchor_units: str = ""
    anchor_x_offset: str = ""
    anchor_y_offset: str = ""
    page_number: str = ""
    x_position: str = ""
    y_position: str = ""
    tab_id: str = ""


class StyledTab(DocuSignModel):
    bold: DSBool = False
    font: str = ""
    font_color: str = ""
    font_size: str = ""
    italic: DSBool = False
    name: str = ""
    underline: DSBool = False


class TemplateTab(DocuSignModel):
    recipient_id: str = ""
    template_locked: DSBool = False
    template_required: DSBool = False


class ConditionalTab(DocuSignModel):
    conditional_parent_label: str = ""
    conditional_parent_value: str = ""


class StandardTab(BaseTab, PositionedTab, StyledTab, TemplateTab, ConditionalTab):
    """Fields common to most tab kinds"""


class EditableTab(StandardTab):
    """A tab whose value the recipient can enter"""

    conceal_value_on_document: DSBool = False
    disable_auto_size: DSBool = False
    height: int = 0
    locked: DSBool = False
    merge_field_xml: str = ""
    required: DSBool = False
    require_initial_on_shared_tab_change: DSBool = False
    shared: DSBool = False
    value: str = ""
    width: int = 0


# ============================================================
# Tab kinds
# ============================================================


class ApproveTab(StandardTab):
    button_text: str = ""
    height: int = 0
    width: int = 0


class DeclineTab(ApproveTab):
    pass


class CheckboxTab(StandardTab):
    merge_field_xml: str = ""
    require_initial_on_shared_tab_change: DSBool = False
    selected: DSBool = False
    shared: DSBool = False


class CompanyTab(StandardTab):
    conceal_value_on_document: DSBool = False
    disable_auto_size: DSBool = False
    locked: DSBool = False
    required: DSBool = False
    value: str = ""
    width: int = 0


class DateSignedTab(StandardTab):
    value: str = ""


class DateTab(EditableTab):
    pass


class EmailAddressTab(StandardTab):
    pass


class EmailTab(EditableTab):
    pass


class EnvelopeIdTab(BaseTab, PositionedTab):
    pass


class FirstNameTab(StandardTab):
    pass


class LastNameTab(StandardTab):
    pass


class FullNameTab(StandardTab):
    pass


class FormulaTab(BaseTab, PositionedTab, StyledTab, TemplateTab):
    conceal_value_on_document: DSBool = False
    disable_auto_size: DSBool = False
    formula: str = ""
    height: int = 0
    is_payment_amount: DSBool = False
    locked: DSBool = False
    merge_field_xml: str = ""
    required: DSBool = False
    round_decimal_places: str = ""
    value: str = ""
    width: int = 0


class InitialHereTab(StandardTab):
    optional: DSBool = False
    scale_value: float = 0.0


class SignHereTab(InitialHereTab):
    pass


class ListItem(DocuSignModel):
    selected: DSBool = False
    text: str = ""
    value: str = ""


class ListTab(StandardTab):
    list_items: List[ListItem] = Field(default_factory=list)
    locked: DSBool = False
    merge_field_xml: str = ""
    required: DSBool = False
    require_initial_on_shared_tab_change: DSBool = False
    sender_required: DSBool = False
    shared: DSBool = False
    value: str = ""
    width: int = 0


class NoteTab(StandardTab):
    height: int = 0
    shared: DSBool = False
    value: str = ""
    width: int = 0


class NumberTab(EditableTab):
    pass


class Radio(PositionedTab):
    locked: DSBool = False
    required: DSBool = False
    selected: DSBool = False
    value: str = ""


class RadioGroupTab(ConditionalTab, TemplateTab):
    document_id: str = ""
    group_name: str = ""
    radios: List[Radio] = Field(default_factory=list)
    require_initial_on_shared_tab_change: DSBool = False
    shared: DSBool = False


class SignerAttachmentTab(BaseTab, PositionedTab, TemplateTab, ConditionalTab):
    optional: DSBool = False


class SsnTab(EditableTab):
    pass


class TextTab(EditableTab):
    is_payment_amount: DSBool = False
    sender_required: DSBool = False
    validation_message: str = ""
    validation_pattern: str = ""


class TitleTab(EditableTab):
    sender_required: DSBool = False
    validation_message: str = ""
    validation_pattern: str = ""


class ZipTab(EditableTab):
    pass


# ============================================================
# Container
# ============================================================


class Tabs(DocuSignModel):
    """The tabs of one recipient, grouped by kind"""

    approve_tabs: List[ApproveTab] = Field(default_factory=list)
    checkbox_tabs: List[CheckboxTab] = Field(default_factory=list)
    company_tabs: List[CompanyTab] = Field(default_factory=list)
    date_signed_tabs: List[DateSignedTab] = Field(default_factory=list)
    date_tabs: List[DateTab] = Field(default_factory=list)
    decline_tabs: List[DeclineTab] = Field(default_factory=list)
    email_address_tabs: List[EmailAddressTab] = Field(default_factory=list)
    email_tabs: List[EmailTab] = Field(default_factory=list)
    envelope_id_tabs: List[EnvelopeIdTab] = Field(default_factory=list)
    first_name_tabs: List[FirstNameTab] = Field(default_factory=list)
    formula_tabs: List[FormulaTab] = Field(default_factory=list)
    full_name_tabs: List[FullNameTab] = Field(default_factory=list)
    initial_here_tabs: List[InitialHereTab] = Field(default_factory=list)
    last_name_tabs: List[LastNameTab] = Field(default_factory=list)
    list_tabs: List[ListTab] = Field(default_factory=list)
    note_tabs: List[NoteTab] = Field(default_factory=list)
    number_tabs: List[NumberTab] = Field(default_factory=list)
    radio_group_tabs: List[RadioGroupTab] = Field(default_factory=list)
    sign_here_tabs: List[SignHereTab] = Field(default_factory=list)
    signer_attachment_tabs: List[SignerAttachmentTab] = Field(default_factory=list)
    ssn_tabs: List[SsnTab] = Field(default_factory=list)
    text_tabs: List[TextTab] = Field(default_factory=list)
    title_tabs: List[TitleTab] = Field(default_factory=list)
    zip_tabs: List[ZipTab] = Field(default_factory=list)

    def values(self) -> List[NameValue]:
        """Return the label and current value of every value carrying tab.

        Radio groups report their group name and the value of the selected
        radio, if any.
        """
        result: List[NameValue] = []
        for name in type(self).model_fields:
            for tab in getattr(self, name):
                if isinstance(tab, RadioGroupTab):
                    selected = next((radio.value for radio in tab.radios if radio.selected), "")
                    result.append(NameValue(name=tab.group_name, value=selected))
                elif hasattr(tab, "value"):
                    result.append(NameValue(name=tab.tab_label, value=tab.value))
        return result
